"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    RadioHubException (base)
       │
       ├── NotFoundError (404)              ← Resource not found
       │      └── UserNotFoundError         ← Acting user absent from the snapshot
       ├── ValidationError (400)            ← Invalid query input
       └── ServiceUnavailableError (503)    ← Dependency down
              └── ExternalServiceError
                     └── ContentApiError (502) ← Content API failed or sent bad data

The aggregation functions never raise: missing relations fall back to
placeholder labels and empty inputs produce zeroed views. Everything here
belongs to the loading stage and the HTTP surface.

Usage:
======
    from radio_hub.shared.core.exceptions import ContentApiError, UserNotFoundError

    raise UserNotFoundError(user_id)
    # {"error": {"code": "NOT_FOUND", "message": "User with id 'u1' not found", "details": {}}}

    raise ContentApiError("scripts", "Content API returned 500")
"""

from typing import Any, Optional


class RadioHubException(Exception):
    """
    Base exception for all Radio Content Hub errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(RadioHubException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Project", project_id)
        # Message: "Project with id 'p1' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """Acting user is not part of the fetched users list."""

    def __init__(self, user_id: str) -> None:
        super().__init__(resource="User", resource_id=user_id)


class ProjectNotFoundError(NotFoundError):
    """Requested project filter matches no project in the snapshot."""

    def __init__(self, project_id: str) -> None:
        super().__init__(resource="Project", resource_id=project_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(RadioHubException):
    """
    Validation error (400 Bad Request).

    Raised when request input fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (502, 503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(RadioHubException):
    """
    Service temporarily unavailable error (503).
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="SERVICE_UNAVAILABLE",
            details=details,
        )


class ExternalServiceError(ServiceUnavailableError):
    """
    External service error.

    More specific error for external API failures.
    """

    def __init__(
        self,
        service_name: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        msg = message or f"{service_name} service error"
        extra_details = details or {}
        extra_details["service"] = service_name
        super().__init__(message=msg, details=extra_details)


class ContentApiError(ExternalServiceError):
    """
    The content API failed or returned data that does not match the schema.

    Reported as 502 Bad Gateway: the hub itself is up, its upstream is not.
    """

    def __init__(
        self,
        resource: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        extra_details = details or {}
        extra_details["resource"] = resource
        super().__init__(
            service_name="content_api",
            message=message or f"Content API request for '{resource}' failed",
            details=extra_details,
        )
        self.status_code = 502
        self.error_code = "CONTENT_API_ERROR"
        self.resource = resource
