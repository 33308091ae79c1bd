"""
Dashboard Handler

Role dashboards built from the current content snapshot.

ARCHITECTURE:
=============
    Handler → DashboardService → aggregation_service

Endpoints:
==========
    GET /dashboards/me?userId=           → dashboard for the user's role
    GET /dashboards/contributor?userId=  → contributor view for an author
    GET /dashboards/editor               → review queue and workflow counts
    GET /dashboards/admin                → platform-wide statistics
    GET /dashboards/member               → engagement numbers
    GET /dashboards/overview             → header stats

The acting user is named by the `userId` query parameter. Role decides
what is shown; access control belongs to whatever sits in front of this
service.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from radio_hub.api.dependencies import DashboardServiceDep, get_view_state
from radio_hub.shared.schemas.common import ErrorResponse, ViewState
from radio_hub.shared.schemas.dashboards import (
    AdminView,
    ContributorView,
    DashboardResponse,
    EditorView,
    MemberView,
    OverviewView,
)


router = APIRouter()


@router.get(
    "/me",
    response_model=DashboardResponse,
    responses={404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def my_dashboard(
    service: DashboardServiceDep,
    user_id: str = Query(..., alias="userId", min_length=1),
    view_state: Optional[ViewState] = Depends(get_view_state),
):
    """
    Dashboard for the acting user, chosen by their role.

    Always carries the overview section plus exactly one role section.
    Unknown users get 404.
    """
    return await service.dashboard_for_user(user_id, view_state=view_state)


@router.get("/contributor", response_model=ContributorView)
async def contributor_dashboard(
    service: DashboardServiceDep,
    user_id: str = Query(..., alias="userId", min_length=1),
):
    """Self-scoped contributor dashboard for one author id."""
    return await service.contributor(user_id)


@router.get("/editor", response_model=EditorView)
async def editor_dashboard(service: DashboardServiceDep):
    """Review queue, workflow counts and recent team activity."""
    return await service.editor()


@router.get("/admin", response_model=AdminView)
async def admin_dashboard(service: DashboardServiceDep):
    """Global totals, role breakdown and activity feed."""
    return await service.admin()


@router.get("/member", response_model=MemberView)
async def member_dashboard(service: DashboardServiceDep):
    return await service.member()


@router.get("/overview", response_model=OverviewView)
async def overview(service: DashboardServiceDep):
    return await service.overview()
