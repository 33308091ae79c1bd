"""
Pydantic Schemas

Response models for the API.

Schema Categories:
==================
- common: Base schema, error responses, health, view state
- dashboards: Role views, overview, script organizer

Usage:
======
    from radio_hub.shared.schemas import DashboardResponse, ViewState
"""

from radio_hub.shared.schemas.common import (
    BaseSchema,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    ViewState,
)
from radio_hub.shared.schemas.dashboards import (
    FeedItem,
    ProjectRollup,
    ContributorStats,
    ContributorView,
    ReviewItem,
    WorkflowStats,
    TeamActivityItem,
    EditorView,
    AdminStats,
    RoleBreakdown,
    AdminView,
    MemberView,
    OverviewView,
    ScriptGroup,
    OrganizedProject,
    DashboardResponse,
    SnapshotSummary,
)

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "ViewState",
    # Dashboards
    "FeedItem",
    "ProjectRollup",
    "ContributorStats",
    "ContributorView",
    "ReviewItem",
    "WorkflowStats",
    "TeamActivityItem",
    "EditorView",
    "AdminStats",
    "RoleBreakdown",
    "AdminView",
    "MemberView",
    "OverviewView",
    "ScriptGroup",
    "OrganizedProject",
    "DashboardResponse",
    "SnapshotSummary",
]
