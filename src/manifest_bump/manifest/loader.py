"""Reading, bumping and writing manifest files."""

import os
from pathlib import Path

import structlog

from ..config.loader import Settings
from ..core.constants import MANIFEST_ENCODING
from ..core.exceptions import ManifestError, ManifestNotFoundError, VersionNotFoundError
from ..core.models import BumpRequest, BumpResult, ParsedDocument
from .walker import parse_json

logger = structlog.get_logger(__name__)


class ManifestLoader:
    """Loads manifests and writes bumped versions back."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    def resolve_path(self, path: Path | str | None = None) -> Path:
        """Fall back to the configured manifest file when no path is given."""
        return Path(path) if path is not None else Path(self.settings.manifest_file)

    def _validate_file(self, path: Path) -> None:
        """Validate that the manifest exists and is readable."""
        if not path.exists():
            raise ManifestNotFoundError(f"Manifest does not exist: {path}")

        if not path.is_file():
            raise ManifestError(f"Path is not a file: {path}")

        if not os.access(path, os.R_OK):
            raise ManifestError(f"Cannot read manifest: {path}")

    def read(self, path: Path) -> str:
        """Read manifest text without newline translation."""
        self._validate_file(path)
        try:
            with open(path, "r", encoding=MANIFEST_ENCODING, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestError(f"Failed to read manifest {path}: {e}", cause=e) from e

    def write(self, path: Path, text: str) -> None:
        """Overwrite the manifest with ``text`` exactly."""
        try:
            with open(path, "w", encoding=MANIFEST_ENCODING, newline="") as f:
                f.write(text)
        except OSError as e:
            raise ManifestError(f"Failed to write manifest {path}: {e}", cause=e) from e

        logger.debug("Manifest written", path=str(path), length=len(text))

    def load(self, path: Path | str | None = None) -> ParsedDocument:
        """Read and walk a manifest."""
        manifest_path = self.resolve_path(path)
        logger.info("Loading manifest", path=str(manifest_path))

        document = parse_json(self.read(manifest_path))

        logger.debug(
            "Manifest loaded",
            path=str(manifest_path),
            version=str(document.version) if document.version else None,
        )
        return document

    def bump(
        self,
        path: Path | str | None = None,
        request: BumpRequest | None = None,
        dry_run: bool = False,
    ) -> BumpResult:
        """Bump the manifest version and write it back.

        Everything up to and including rendering the new text happens before
        the file is opened for writing, so any failure leaves it untouched.
        """
        manifest_path = self.resolve_path(path)
        request = request or BumpRequest()

        document = self.load(manifest_path)
        if not document.has_version:
            raise VersionNotFoundError(str(manifest_path))
        version = document.require_version()
        previous = version.model_copy()

        version.bump(request)
        text = document.emit()

        if dry_run:
            logger.info("Dry run, manifest not written", path=str(manifest_path), version=str(version))
        else:
            self.write(manifest_path, text)

        result = BumpResult(path=manifest_path, previous=previous, current=version.model_copy(), written=not dry_run)
        logger.info("Version bumped", path=str(manifest_path), previous=str(previous), current=str(version))
        return result
