"""Shared pytest configuration."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a CLI test applied.

    The CLI binds structlog to the stderr stream that was active when it ran,
    which is closed once the CliRunner invocation finishes.
    """
    yield
    structlog.reset_defaults()
