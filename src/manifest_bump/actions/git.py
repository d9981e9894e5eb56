"""Git commit and tag operations."""

import shlex
from pathlib import Path

import structlog
from invoke import Context

from ..config.loader import Settings
from ..core.exceptions import GitError
from ..core.models import Version

logger = structlog.get_logger(__name__)


class GitExecutor:
    """Commits a bumped manifest and tags the release."""

    def __init__(self, settings: Settings | None = None, context: Context | None = None) -> None:
        self.settings = settings or Settings()
        self.ctx = context or Context()

    def _run(self, *args: str) -> None:
        cmd = " ".join(shlex.quote(part) for part in (self.settings.git_executable, *args))
        logger.debug("Executing git command", cmd=cmd)

        try:
            result = self.ctx.run(cmd, hide=True, warn=True)
        except Exception as e:
            raise GitError(f"Failed to run git: {e}", cause=e) from e

        if result is None or result.failed:
            stderr = result.stderr.strip() if result is not None else ""
            exit_code = result.return_code if result is not None else None
            raise GitError(f"git {args[0]} failed: {stderr}", exit_code=exit_code)

    def stage(self, path: Path) -> None:
        self._run("add", str(path))

    def commit(self, message: str, sign: bool = False) -> None:
        args = ["commit", "-m", message]
        if sign:
            args.append("-S")
        self._run(*args)

    def tag(self, name: str) -> None:
        self._run("tag", name)

    def commit_and_tag(
        self,
        version: Version,
        path: Path,
        message: str | None = None,
        sign: bool | None = None,
    ) -> str:
        """Stage the manifest, commit it and tag the new commit.

        Returns the tag name.
        """
        tag = self.settings.tag_for(version)
        message = message or self.settings.commit_message_for(version)
        sign = self.settings.sign_commits if sign is None else sign

        logger.info("Committing version bump", tag=tag, path=str(path), signed=sign)

        self.stage(path)
        self.commit(message, sign=sign)
        self.tag(tag)

        logger.info("Tagged release", tag=tag)
        return tag
