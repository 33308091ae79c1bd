"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "CONTENT_API_ERROR",
            "message": "Content API request for scripts failed",
            "details": {"service": "content_api", "resource": "scripts"}
        }
    }

Exception Handling:
===================
1. RadioHubException subclasses → Use their status_code and to_dict()
2. Request / Pydantic validation errors → 400 with validation details
3. Other exceptions → 500 with generic message (details hidden)

Usage:
======
    from radio_hub.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from radio_hub.shared.core.exceptions import RadioHubException
from radio_hub.shared.core.logging import logger


def _validation_response(errors: list[Any], message: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": message,
                "details": {"errors": jsonable_encoder(errors)},
            }
        },
    )


def unexpected_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and return the generic 500 envelope."""
    logger.error(
        "Unexpected error",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(RadioHubException)
    async def radio_hub_exception_handler(
        request: Request,
        exc: RadioHubException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        All custom exceptions inherit from RadioHubException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed query parameters and bodies."""
        logger.warning("Request validation error", path=request.url.path)
        return _validation_response(exc.errors(), "Request validation failed")

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors raised while building responses.
        """
        logger.warning(
            "Validation error",
            error_count=exc.error_count(),
            path=request.url.path,
        )
        return _validation_response(exc.errors(), "Validation failed")

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        return unexpected_error_response(request, exc)
