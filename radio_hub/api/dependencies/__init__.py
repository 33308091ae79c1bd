"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Services: get_snapshot_service(), get_dashboard_service()
- View state: get_view_state()

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(service: DashboardService = Depends(get_dashboard_service)):

    # Write this:
    async def handler(service: DashboardServiceDep):

Usage:
======
    from radio_hub.api.dependencies import DashboardServiceDep, get_view_state

    @router.get("/me")
    async def my_dashboard(
        service: DashboardServiceDep,
        user_id: str = Query(..., alias="userId"),
    ):
        return await service.dashboard_for_user(user_id)
"""

from radio_hub.api.dependencies.services import (
    get_content_api_adapter,
    get_snapshot_service,
    get_dashboard_service,
    DashboardServiceDep,
    SnapshotServiceDep,
)
from radio_hub.api.dependencies.view_state import get_view_state

__all__ = [
    # Services
    "get_content_api_adapter",
    "get_snapshot_service",
    "get_dashboard_service",
    "DashboardServiceDep",
    "SnapshotServiceDep",
    # View state
    "get_view_state",
]
