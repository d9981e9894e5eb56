"""Post-bump shell command execution."""

from pathlib import Path

import structlog
from invoke import Context

from ..core.exceptions import CommandError

logger = structlog.get_logger(__name__)


class HookExecutor:
    """Runs a user supplied command after the manifest is rewritten."""

    def __init__(self, context: Context | None = None) -> None:
        self.ctx = context or Context()

    def run(self, command: str, cwd: Path | None = None) -> None:
        """Run ``command`` through the shell, failing on a nonzero exit."""
        if not command.strip():
            raise CommandError("After-run command is empty")

        logger.info("Running after-run command", cmd=command, cwd=str(cwd) if cwd else None)

        try:
            if cwd is not None:
                with self.ctx.cd(str(cwd)):
                    result = self.ctx.run(command, warn=True)
            else:
                result = self.ctx.run(command, warn=True)
        except Exception as e:
            raise CommandError(f"Failed to run after-run command: {e}", cause=e) from e

        if result is None or result.failed:
            exit_code = result.return_code if result is not None else None
            raise CommandError(f"After-run command failed: {command}", exit_code=exit_code)

        logger.debug("After-run command completed", cmd=command)
