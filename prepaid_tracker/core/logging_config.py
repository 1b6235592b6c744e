"""
Logging setup for host applications embedding the tracker utilities.

Modules log with structlog.get_logger(); this wires structlog onto stdlib
logging at the configured level.
"""

import logging

import structlog

from .config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure stdlib logging and structlog processors.

    Args:
        settings: Settings to apply (defaults to get_settings())
    """
    settings = settings or get_settings()
    level = logging.getLevelNamesMapping()[settings.log_level]

    logging.basicConfig(format="%(message)s")
    logging.getLogger().setLevel(level)

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
