"""Command line interface for manifest-bump."""

from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from .actions.git import GitExecutor
from .actions.hook import HookExecutor
from .config.loader import load_settings
from .config.logging import configure_logging
from .core.constants import BUMP_KEYWORDS, DEFAULT_BUMP, VERSION_PATTERN
from .core.exceptions import ManifestBumpError
from .core.models import BumpRequest
from .manifest.loader import ManifestLoader

logger = structlog.get_logger(__name__)
console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    help="Bump the version field of a JSON manifest without touching anything else.",
    add_completion=False,
)


def _validate_version_argument(value: str) -> str:
    if value in BUMP_KEYWORDS or VERSION_PATTERN.fullmatch(value):
        return value
    raise typer.BadParameter("Invalid version format")


@app.command()
def bump(
    version: str = typer.Argument(
        DEFAULT_BUMP,
        callback=_validate_version_argument,
        help="major, minor, patch or an explicit X.Y.Z version",
    ),
    file: Optional[Path] = typer.Option(None, "-f", "--file", help="Path to the manifest (default: manifest.json)"),
    git: bool = typer.Option(False, "-g", "--git", help="git commit and add tag"),
    sign: bool = typer.Option(False, "-S", "--sign", help="Sign the git commit"),
    message: Optional[str] = typer.Option(None, "-m", "--message", help="Message for the git commit"),
    after_run: Optional[str] = typer.Option(
        None, "-r", "--run", help="Command to run after the version bump (before commit)"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the new version without writing anything"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Bump the manifest version."""
    if sign and not git:
        raise typer.BadParameter("requires --git", param_hint="'-S' / '--sign'")
    if message is not None and not git:
        raise typer.BadParameter("requires --git", param_hint="'-m' / '--message'")

    try:
        settings = load_settings(debug=True) if debug else load_settings()
        configure_logging(settings)
        logger.debug(
            "Settings loaded",
            manifest_file=settings.manifest_file,
            log_level=settings.effective_log_level,
            tag_prefix=settings.tag_prefix,
        )

        loader = ManifestLoader(settings)
        result = loader.bump(file, BumpRequest.from_argument(version), dry_run=dry_run)

        if not dry_run:
            if after_run:
                HookExecutor().run(after_run)

            if git:
                GitExecutor(settings).commit_and_tag(
                    result.current,
                    result.path,
                    message=message,
                    sign=True if sign else None,
                )
    except ManifestBumpError as e:
        err_console.print(f"[bold red]Error:[/] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=1) from e

    suffix = " [dim](dry run)[/]" if dry_run else ""
    console.print(f"{result.summary}{suffix}", highlight=False)


def main() -> None:
    app(prog_name="manifest-bump")


if __name__ == "__main__":
    main()
