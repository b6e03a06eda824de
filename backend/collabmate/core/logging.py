"""
Structured logging configuration for CollabMate.

Uses structlog for JSON-formatted logs in production,
and colored console output in development.
"""

import logging
import sys
from typing import Any

import structlog
from collabmate.core.settings import settings


def configure_logging() -> None:
    """Configure structured logging based on environment."""

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.app_debug:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=not settings.testing)]
    else:
        # Production: JSON output for log aggregators
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_level = logging.DEBUG if settings.app_debug else logging.INFO

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # SQL echo only makes sense when debugging outside of tests
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.app_debug and not settings.testing else logging.WARNING
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Example:
        >>> from collabmate.core.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("application_submitted", application_id=12, project_id=3)
    """
    return structlog.get_logger(name)
