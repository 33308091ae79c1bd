"""
Dashboard view models.

Frozen, camelCase-serialized results of the aggregation functions. One
model per role dashboard plus the shared overview and the script organizer.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ..models.entities import Project, Script
from ..models.enums import FeedItemType, ScriptStatus, UserRole
from .common import BaseSchema, ViewState


class FeedItem(BaseSchema):
    """One entry of a highlight or activity feed."""

    type: FeedItemType
    item_id: str
    title: str
    action: str
    timestamp: Optional[datetime] = None
    project_name: str


# ═══════════════════════════════════════════════════════════════════════════════
# CONTRIBUTOR
# ═══════════════════════════════════════════════════════════════════════════════


class ProjectRollup(BaseSchema):
    """How much of a project the contributor wrote."""

    project: Project
    script_count: int
    approved_count: int


class ContributorStats(BaseSchema):
    """
    Personal productivity numbers.

    `total_word_count` and `avg_words_per_script` count characters of script
    content, not tokenized words.
    """

    total_scripts: int = 0
    approved_count: int = 0
    weekly_output: int = 0
    approval_rate: int = Field(default=0, ge=0, le=100)
    total_word_count: int = 0
    avg_words_per_script: int = 0


class ContributorView(BaseSchema):
    """Self-scoped dashboard: only the acting user's own scripts."""

    user_id: str
    my_scripts: tuple[Script, ...] = ()
    active: tuple[Script, ...] = ()
    needs_revision: tuple[Script, ...] = ()
    submitted: tuple[Script, ...] = ()
    my_projects: tuple[Project, ...] = ()
    project_rollups: tuple[ProjectRollup, ...] = ()
    highlights: tuple[FeedItem, ...] = ()
    stats: ContributorStats = ContributorStats()


# ═══════════════════════════════════════════════════════════════════════════════
# EDITOR
# ═══════════════════════════════════════════════════════════════════════════════


class ReviewItem(BaseSchema):
    """A script waiting for an editor, with its project label resolved."""

    script: Script
    project_name: str


class WorkflowStats(BaseSchema):
    """Status counts across every script in the snapshot."""

    draft: int = 0
    in_review: int = 0
    approved: int = 0
    needs_revision: int = 0


class TeamActivityItem(BaseSchema):
    script_id: str
    title: str
    author: str
    status: ScriptStatus
    time: Optional[datetime] = None
    project_name: str


class EditorView(BaseSchema):
    """Project-wide review dashboard."""

    awaiting_review: tuple[ReviewItem, ...] = ()
    projects_with_pending: tuple[Project, ...] = ()
    workflow_stats: WorkflowStats = WorkflowStats()
    team_activity: tuple[TeamActivityItem, ...] = ()
    top_performance: tuple[Script, ...] = ()


# ═══════════════════════════════════════════════════════════════════════════════
# ADMIN
# ═══════════════════════════════════════════════════════════════════════════════


class AdminStats(BaseSchema):
    total_projects: int = 0
    total_episodes: int = 0
    total_scripts: int = 0
    total_users: int = 0
    active_users: int = 0
    pending_reviews: int = 0
    overdue_items: int = 0


class RoleBreakdown(BaseSchema):
    """User counts per role, plus accounts still pending verification."""

    admin: int = 0
    editor: int = 0
    contributor: int = 0
    member: int = 0
    pending: int = 0


class AdminView(BaseSchema):
    stats: AdminStats = AdminStats()
    role_breakdown: RoleBreakdown = RoleBreakdown()
    activity: tuple[FeedItem, ...] = ()
    status_breakdown: dict[str, int] = Field(default_factory=dict)
    language_breakdown: dict[str, int] = Field(default_factory=dict)


# ═══════════════════════════════════════════════════════════════════════════════
# MEMBER & OVERVIEW
# ═══════════════════════════════════════════════════════════════════════════════


class MemberView(BaseSchema):
    """Listener-facing engagement numbers."""

    total_content: int = 0
    total_projects: int = 0
    this_week_content: int = 0
    member_level: int = 1


class OverviewView(BaseSchema):
    """Header stats shown on every dashboard."""

    active_projects: int = 0
    episodes_this_month: int = 0
    scripts_pending: int = 0
    monthly_episode_goal: int = 0
    episode_progress: float = 0.0


# ═══════════════════════════════════════════════════════════════════════════════
# SCRIPT ORGANIZER
# ═══════════════════════════════════════════════════════════════════════════════


class ScriptGroup(BaseSchema):
    """All language versions of one script."""

    group_key: str
    scripts: tuple[Script, ...]
    primary_script: Script


class OrganizedProject(BaseSchema):
    project: Project
    script_groups: tuple[ScriptGroup, ...] = ()
    total_versions: int = 0


# ═══════════════════════════════════════════════════════════════════════════════
# ENVELOPE
# ═══════════════════════════════════════════════════════════════════════════════


class DashboardResponse(BaseSchema):
    """
    What a dashboard route returns.

    Exactly one of the role sections is set, matching `role`.
    """

    role: UserRole
    user_id: Optional[str] = None
    overview: OverviewView
    contributor: Optional[ContributorView] = None
    editor: Optional[EditorView] = None
    admin: Optional[AdminView] = None
    member: Optional[MemberView] = None
    view_state: Optional[ViewState] = None
    snapshot_fetched_at: Optional[datetime] = None


class SnapshotSummary(BaseSchema):
    """Record counts of a freshly loaded snapshot."""

    projects: int
    episodes: int
    scripts: int
    users: int
    fetched_at: datetime
