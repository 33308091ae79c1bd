"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request, which is fine because:
- Services only hold references to adapters
- Adapters are process-wide singletons (lru_cache)
- Snapshots are reloaded or read from Redis on every request

Tests swap the whole data source by overriding get_snapshot_service:

    app.dependency_overrides[get_snapshot_service] = lambda: fake_service

Usage:
======
    from radio_hub.api.dependencies.services import DashboardServiceDep

    @router.get("/editor")
    async def editor_dashboard(service: DashboardServiceDep):
        return await service.editor()
"""

import functools
from typing import Annotated

from fastapi import Depends

from ...config.settings import settings
from ...shared.adapters.content_api_adapter import ContentApiAdapter
from ...shared.adapters.redis_adapter import get_redis_adapter
from ...shared.services.dashboard_service import DashboardService
from ...shared.services.snapshot_service import SnapshotService


@functools.lru_cache(maxsize=1)
def get_content_api_adapter() -> ContentApiAdapter:
    """Get or create the content API adapter singleton."""
    return ContentApiAdapter()


def get_snapshot_service() -> SnapshotService:
    """
    Dependency to get SnapshotService instance.

    Redis is only wired in when snapshot caching is switched on.
    """
    cache = get_redis_adapter() if settings.SNAPSHOT_CACHE_ENABLED else None
    return SnapshotService(get_content_api_adapter(), cache=cache)


def get_dashboard_service(
    snapshots: SnapshotService = Depends(get_snapshot_service),
) -> DashboardService:
    """
    Dependency to get DashboardService instance.
    """
    return DashboardService(snapshots)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]
SnapshotServiceDep = Annotated[SnapshotService, Depends(get_snapshot_service)]
