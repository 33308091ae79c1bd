"""
Radio Content Hub API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                         RADIO CONTENT HUB API                               │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:   CORS → Request Context → Error Handler                      │
│                              │                                              │
│                              ▼                                              │
│   Routers:      Health │ Dashboards │ Content                               │
│                              │                                              │
│                              ▼                                              │
│   Services:     DashboardService → SnapshotService                          │
│                              │                │                             │
│                              ▼                ▼                             │
│                 aggregation (pure)   Content API (httpx) + Redis cache      │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → logging configured, startup logged
2. Application serves requests (snapshots are loaded lazily per request)
3. Application stops → shutdown logged

Usage:
======
    # Run with uvicorn
    uvicorn radio_hub.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically
    from radio_hub.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from radio_hub.config.settings import settings
from radio_hub.shared.core.logging import logger, setup_logging
from radio_hub.api.middleware import setup_exception_handlers, setup_request_context
from radio_hub.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    There are no pools to open: the content API client is created per
    fetch and Redis connects lazily on first use.
    """
    logger.info(
        "Starting Radio Content Hub API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        content_api=settings.CONTENT_API_BASE_URL,
        snapshot_cache=settings.SNAPSHOT_CACHE_ENABLED,
    )

    yield

    logger.info("Radio Content Hub API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Configures structured logging
    2. Creates the FastAPI app with settings
    3. Adds CORS middleware
    4. Sets up exception handlers and registers routes
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Role-scoped dashboards for radio projects, episodes and scripts",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_request_context(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
