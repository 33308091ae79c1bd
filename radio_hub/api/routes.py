"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /dashboards             → Role dashboards and overview
    /content                → Script organizer, snapshot refresh

Usage:
======
    from radio_hub.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from radio_hub.api.handlers import (
    content_handler,
    dashboard_handler,
    health_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        dashboard_handler.router,
        prefix="/dashboards",
        tags=["Dashboards"],
    )

    app.include_router(
        content_handler.router,
        prefix="/content",
        tags=["Content"],
    )
