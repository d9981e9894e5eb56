"""structlog configuration."""

import logging
import sys

import structlog

from .loader import Settings


def configure_logging(settings: Settings) -> None:
    """Route structlog output to stderr at the configured level.

    stdout is reserved for the bump summary.
    """
    level = getattr(logging, settings.effective_log_level, logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
