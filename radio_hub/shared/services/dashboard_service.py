"""
Dashboard Service

Loads a snapshot and runs the pure aggregation functions over it.

This is the only layer between the HTTP handlers and the aggregator: it
resolves the acting user, picks the view and logs what was built. All
numbers come from aggregation_service.

Usage:
======
    from radio_hub.shared.services.dashboard_service import DashboardService

    service = DashboardService(snapshot_service)
    dashboard = await service.dashboard_for_user("user_42")
"""

from datetime import datetime
from typing import Optional

from ..core.exceptions import ProjectNotFoundError, UserNotFoundError, ValidationError
from ..core.logging import get_logger
from ..models.entities import ContentSnapshot, User
from ..models.enums import UserRole
from ..schemas.common import ViewState
from ..schemas.dashboards import (
    AdminView,
    ContributorView,
    DashboardResponse,
    EditorView,
    MemberView,
    OrganizedProject,
    OverviewView,
    SnapshotSummary,
)
from . import aggregation_service as aggregate
from .snapshot_service import SnapshotService

logger = get_logger(__name__)


def _clean_user_id(user_id: str) -> str:
    cleaned = user_id.strip()
    if not cleaned:
        raise ValidationError("userId must not be blank", details={"field": "userId"})
    return cleaned


class DashboardService:
    """
    Service for dashboard queries.

    Handles:
    - Role-dispatched dashboards for a known user
    - Direct access to each role view
    - Script organization with search
    - Snapshot refresh
    """

    def __init__(self, snapshots: SnapshotService) -> None:
        """
        Initialize DashboardService.

        Args:
            snapshots: Where snapshots come from
        """
        self.snapshots = snapshots

    async def _snapshot(self) -> ContentSnapshot:
        return await self.snapshots.get_snapshot()

    async def dashboard_for_user(
        self,
        user_id: str,
        view_state: Optional[ViewState] = None,
        now: Optional[datetime] = None,
    ) -> DashboardResponse:
        """
        Build the dashboard for a user according to their role.

        Raises:
            UserNotFoundError: If the user is not in the snapshot
            ContentApiError: If the snapshot cannot be loaded
        """
        user_id = _clean_user_id(user_id)
        snapshot = await self._snapshot()
        user = snapshot.find_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        dashboard = aggregate.build_dashboard(snapshot, user, now=now, view_state=view_state)
        logger.info("Dashboard built", user_id=user_id, role=user.role.value)
        return dashboard

    async def contributor(self, user_id: str, now: Optional[datetime] = None) -> ContributorView:
        """
        Contributor view for an author id.

        The id need not appear in the users list; an unknown author simply
        has no scripts.
        """
        user_id = _clean_user_id(user_id)
        snapshot = await self._snapshot()
        user = snapshot.find_user(user_id) or User(id=user_id, role=UserRole.CONTRIBUTOR)
        return aggregate.contributor_view(
            snapshot.scripts, snapshot.projects, snapshot.episodes, user, now=now
        )

    async def editor(self) -> EditorView:
        snapshot = await self._snapshot()
        return aggregate.editor_view(snapshot.scripts, snapshot.projects)

    async def admin(self) -> AdminView:
        snapshot = await self._snapshot()
        return aggregate.admin_view(
            snapshot.scripts, snapshot.projects, snapshot.episodes, snapshot.users
        )

    async def member(self, now: Optional[datetime] = None) -> MemberView:
        snapshot = await self._snapshot()
        return aggregate.member_view(snapshot.scripts, snapshot.projects, snapshot.episodes, now=now)

    async def overview(self, now: Optional[datetime] = None) -> OverviewView:
        snapshot = await self._snapshot()
        return aggregate.overview_view(
            snapshot.scripts, snapshot.projects, snapshot.episodes, now=now
        )

    async def organized_scripts(
        self,
        search: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> tuple[OrganizedProject, ...]:
        """
        Scripts grouped by project and language group.

        Raises:
            ProjectNotFoundError: If project_id names no project in the snapshot
        """
        snapshot = await self._snapshot()
        if project_id is not None and not any(p.id == project_id for p in snapshot.projects):
            raise ProjectNotFoundError(project_id)
        return aggregate.organize_scripts(
            snapshot.scripts, snapshot.projects, search=search, project_id=project_id
        )

    async def refresh_snapshot(self) -> SnapshotSummary:
        """Drop the cached copy and reload from the content API."""
        self.snapshots.invalidate()
        snapshot = await self.snapshots.get_snapshot(refresh=True)
        return SnapshotSummary(
            projects=len(snapshot.projects),
            episodes=len(snapshot.episodes),
            scripts=len(snapshot.scripts),
            users=len(snapshot.users),
            fetched_at=snapshot.fetched_at,
        )
