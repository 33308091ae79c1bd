"""
Content Handler

Script library and snapshot maintenance endpoints.

Endpoints:
==========
    GET    /content/scripts/organized  → scripts grouped by project and language group
    POST   /content/snapshot/refresh   → reload from the content API, replacing the cache
    DELETE /content/snapshot/cache     → drop the cached snapshot

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses
"""

from typing import Optional

from fastapi import APIRouter, Query

from radio_hub.api.dependencies import DashboardServiceDep, SnapshotServiceDep
from radio_hub.shared.core.logging import logger
from radio_hub.shared.schemas.common import ErrorResponse, MessageResponse
from radio_hub.shared.schemas.dashboards import OrganizedProject, SnapshotSummary


router = APIRouter()


@router.get(
    "/scripts/organized",
    response_model=list[OrganizedProject],
    responses={404: {"model": ErrorResponse}},
)
async def organized_scripts(
    service: DashboardServiceDep,
    search: Optional[str] = Query(
        None, description="Case-insensitive match on title, description or language"
    ),
    project_id: Optional[str] = Query(None, alias="projectId"),
):
    """
    Scripts grouped by project, then by language group.

    With `search`, only matching scripts are listed and projects without a
    match are left out. An unknown `projectId` is a 404.
    """
    return list(await service.organized_scripts(search=search, project_id=project_id))


@router.post(
    "/snapshot/refresh",
    response_model=SnapshotSummary,
    responses={502: {"model": ErrorResponse}},
)
async def refresh_snapshot(service: DashboardServiceDep):
    """
    Reload the snapshot from the content API.

    The fresh snapshot replaces any cached copy.
    """
    summary = await service.refresh_snapshot()
    logger.info("Snapshot refreshed", scripts=summary.scripts, users=summary.users)
    return summary


@router.delete("/snapshot/cache", response_model=MessageResponse)
async def clear_snapshot_cache(snapshots: SnapshotServiceDep):
    """Drop the cached snapshot so the next request refetches."""
    removed = snapshots.invalidate()
    return MessageResponse(
        message="Snapshot cache cleared" if removed else "No cached snapshot to clear",
    )
