"""
Request context middleware.

Binds a request id and the request path to every log line emitted while
the request is handled, and echoes the id back in `X-Request-ID`.

Unhandled exceptions are turned into the 500 envelope here, while the
request id is still bound, so error responses carry the header too.
"""

import uuid

from fastapi import FastAPI, Request

from radio_hub.api.middleware.error_handler import unexpected_error_response
from radio_hub.shared.core.logging import clear_log_context, log_context

REQUEST_ID_HEADER = "X-Request-ID"


def setup_request_context(app: FastAPI) -> None:
    """Register the request context middleware on the app."""

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        clear_log_context()
        log_context(request_id=request_id, path=request.url.path)
        try:
            response = await call_next(request)
        except Exception as exc:
            response = unexpected_error_response(request, exc)
        finally:
            clear_log_context()
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
