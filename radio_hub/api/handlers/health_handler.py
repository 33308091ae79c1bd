"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter

from radio_hub.config.settings import settings
from radio_hub.shared.adapters.redis_adapter import get_redis_adapter
from radio_hub.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower().replace(" ", "-"),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check():
    """
    Readiness check for Kubernetes/load balancers.

    The snapshot cache is optional, so an unreachable Redis is reported
    but does not make the service unready.

    Returns:
        Ready status with the cache state
    """
    if not settings.SNAPSHOT_CACHE_ENABLED:
        cache = "disabled"
    elif get_redis_adapter().ping():
        cache = "ok"
    else:
        cache = "unavailable"
    return {"status": "ready", "cache": cache}


@router.get("/live")
async def liveness_check():
    """
    Liveness check for Kubernetes.

    Returns:
        Simple alive status
    """
    return {"status": "alive"}
