"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from radio_hub.shared.core.logging import logger, get_logger
    from radio_hub.shared.core.exceptions import RadioHubException, NotFoundError

    logger.info("Snapshot loaded", scripts=len(snapshot.scripts))
"""

from radio_hub.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from radio_hub.shared.core.exceptions import (
    RadioHubException,
    NotFoundError,
    UserNotFoundError,
    ProjectNotFoundError,
    ValidationError,
    ServiceUnavailableError,
    ExternalServiceError,
    ContentApiError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "RadioHubException",
    "NotFoundError",
    "UserNotFoundError",
    "ProjectNotFoundError",
    "ValidationError",
    "ServiceUnavailableError",
    "ExternalServiceError",
    "ContentApiError",
]
