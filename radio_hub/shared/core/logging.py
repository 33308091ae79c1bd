"""
Logging Configuration

Structured logging for the dashboard service, built on structlog.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] Snapshot loaded                scripts=42 source=content_api

Production (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "Snapshot loaded", "scripts": 42}

Usage:
======
    from radio_hub.shared.core.logging import logger, get_logger, log_context

    logger.info("Dashboard built", role="editor", scripts=len(scripts))

    cache_logger = get_logger("snapshot")
    cache_logger.debug("Cache miss", key=key)

    # Bind request-scoped fields to every subsequent log line
    log_context(request_id=request_id, user_id=user_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from radio_hub.config.settings import settings


def setup_logging() -> None:
    """
    Configure structlog and the stdlib root logger.

    Development gets colored console output; every other environment
    renders one JSON object per line.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
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


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a named structured logger.

    Args:
        name: Logger name, e.g. "snapshot" or "aggregation"

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Bind key/value pairs to all subsequent log calls in this context.

    Args:
        **kwargs: Fields to attach (request_id, user_id, role, ...)
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop all fields bound with log_context()."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("radio_hub")
