"""
Content Aggregation

Pure functions that turn a snapshot of projects, episodes, scripts and users
into role-specific dashboard view models.

AGGREGATION RULES:
- Inputs are full, unfiltered lists; nothing here performs I/O
- Inputs are never mutated and outputs are frozen models
- Missing relations resolve to "Unknown" / "Unknown Project", never an error
- Ratios over empty collections are 0
- Sorts are stable; entries without a timestamp sort after dated ones

Role Dispatch:
==============
    admin       → admin_view
    editor      → editor_view
    contributor → contributor_view (self-scoped by author id)
    member      → member_view
    (all)       → overview_view

Usage:
======
    from radio_hub.shared.services.aggregation_service import build_dashboard

    dashboard = build_dashboard(snapshot, user)
"""

import math
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from ..models.entities import ContentSnapshot, Episode, Project, Script, User
from ..models.enums import (
    AWAITING_REVIEW_STATUSES,
    OVERVIEW_PENDING_STATUSES,
    PENDING_WORK_STATUSES,
    FeedItemType,
    ScriptStatus,
    StatusBucket,
    UserRole,
    UserStatus,
    bucket_for,
    ensure_exhaustive,
)
from ..schemas.common import ViewState
from ..schemas.dashboards import (
    AdminStats,
    AdminView,
    ContributorStats,
    ContributorView,
    DashboardResponse,
    EditorView,
    FeedItem,
    MemberView,
    OrganizedProject,
    OverviewView,
    ProjectRollup,
    ReviewItem,
    RoleBreakdown,
    ScriptGroup,
    TeamActivityItem,
    WorkflowStats,
)
from ..utils import constants

T = TypeVar("T")


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════


def _resolve_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def _round_half_up(value: float) -> int:
    """Round .5 up, as dashboard percentages always have."""
    return int(math.floor(value + 0.5))


def _newest_first(items: Iterable[T], key: Callable[[T], Optional[datetime]]) -> list[T]:
    """Stable sort, newest first, undated items last."""

    def sort_key(item: T) -> tuple[bool, datetime]:
        ts = key(item)
        return (ts is not None, ts or datetime.min.replace(tzinfo=timezone.utc))

    return sorted(items, key=sort_key, reverse=True)


def _project_names(projects: Iterable[Project]) -> dict[str, str]:
    return {project.id: project.name for project in projects if project.name}


def _resolve_project_name(names: dict[str, str], project_id: str, fallback: str) -> str:
    return names.get(project_id) or fallback


def _count_since(timestamps: Iterable[Optional[datetime]], cutoff: datetime) -> int:
    return sum(1 for ts in timestamps if ts is not None and ts >= cutoff)


# ═══════════════════════════════════════════════════════════════════════════════
# CONTRIBUTOR
# ═══════════════════════════════════════════════════════════════════════════════


def contributor_view(
    scripts: Sequence[Script],
    projects: Sequence[Project],
    episodes: Sequence[Episode],
    user: User,
    now: Optional[datetime] = None,
) -> ContributorView:
    """
    Build the self-scoped dashboard for a script author.

    Args:
        scripts: Every script in the snapshot
        projects: Every project in the snapshot
        episodes: Every episode in the snapshot
        user: Acting user; only scripts with author_id == user.id count as "mine"
        now: Reference time for the weekly window (defaults to current UTC time)

    Returns:
        ContributorView with the workflow partition, touched projects,
        platform highlights and productivity stats
    """
    now = _resolve_now(now)
    names = _project_names(projects)

    mine = [script for script in scripts if script.author_id == user.id]

    buckets: dict[StatusBucket, list[Script]] = {bucket: [] for bucket in StatusBucket}
    for script in mine:
        buckets[bucket_for(script.status)].append(script)

    script_counts = Counter(script.project_id for script in mine)
    approved_counts = Counter(
        script.project_id for script in mine if script.status is ScriptStatus.APPROVED
    )
    my_projects = [project for project in projects if script_counts[project.id] > 0]
    rollups = [
        ProjectRollup(
            project=project,
            script_count=script_counts[project.id],
            approved_count=approved_counts[project.id],
        )
        for project in my_projects
    ]

    return ContributorView(
        user_id=user.id,
        my_scripts=tuple(mine),
        active=tuple(buckets[StatusBucket.ACTIVE]),
        needs_revision=tuple(buckets[StatusBucket.NEEDS_REVISION]),
        submitted=tuple(buckets[StatusBucket.SUBMITTED]),
        my_projects=tuple(my_projects),
        project_rollups=tuple(rollups),
        highlights=_platform_highlights(scripts, episodes, names),
        stats=_contributor_stats(mine, now),
    )


def _platform_highlights(
    scripts: Sequence[Script],
    episodes: Sequence[Episode],
    names: dict[str, str],
) -> tuple[FeedItem, ...]:
    recent_episodes = _newest_first(episodes, key=lambda e: e.created_at)
    recently_approved = _newest_first(
        (s for s in scripts if s.status is ScriptStatus.APPROVED),
        key=lambda s: s.last_activity_at,
    )

    items = [
        FeedItem(
            type=FeedItemType.EPISODE,
            item_id=episode.id,
            title=episode.title,
            action=constants.EPISODE_PUBLISHED_ACTION,
            timestamp=episode.created_at,
            project_name=_resolve_project_name(
                names, episode.project_id, constants.UNKNOWN_PROJECT_LABEL
            ),
        )
        for episode in recent_episodes[: constants.HIGHLIGHT_EPISODE_COUNT]
    ]
    items.extend(
        FeedItem(
            type=FeedItemType.SCRIPT,
            item_id=script.id,
            title=script.title,
            action=constants.SCRIPT_APPROVED_ACTION,
            timestamp=script.last_activity_at,
            project_name=_resolve_project_name(
                names, script.project_id, constants.UNKNOWN_PROJECT_LABEL
            ),
        )
        for script in recently_approved[: constants.HIGHLIGHT_SCRIPT_COUNT]
    )
    return tuple(_newest_first(items, key=lambda item: item.timestamp)[: constants.FEED_LIMIT])


def _contributor_stats(mine: Sequence[Script], now: datetime) -> ContributorStats:
    if not mine:
        return ContributorStats()

    cutoff = now - timedelta(days=constants.WEEKLY_WINDOW_DAYS)
    approved = sum(1 for script in mine if script.status is ScriptStatus.APPROVED)
    # Character count of the content, kept as the dashboards have always shown it.
    total_chars = sum(len(script.content) for script in mine)

    return ContributorStats(
        total_scripts=len(mine),
        approved_count=approved,
        weekly_output=_count_since((script.created_at for script in mine), cutoff),
        approval_rate=_round_half_up(100 * approved / len(mine)),
        total_word_count=total_chars,
        avg_words_per_script=_round_half_up(total_chars / len(mine)),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# EDITOR
# ═══════════════════════════════════════════════════════════════════════════════


def editor_view(scripts: Sequence[Script], projects: Sequence[Project]) -> EditorView:
    """
    Build the project-wide review dashboard.

    Not scoped to the acting user: editors see every script.
    """
    names = _project_names(projects)
    counts = Counter(script.status for script in scripts)

    awaiting = [
        ReviewItem(
            script=script,
            project_name=_resolve_project_name(names, script.project_id, constants.UNKNOWN_LABEL),
        )
        for script in scripts
        if script.status in AWAITING_REVIEW_STATUSES
    ]

    pending_project_ids = {
        script.project_id for script in scripts if script.status in PENDING_WORK_STATUSES
    }

    team_activity = [
        TeamActivityItem(
            script_id=script.id,
            title=script.title,
            author=script.author_id,
            status=script.status,
            time=script.created_at,
            project_name=_resolve_project_name(
                names, script.project_id, constants.UNKNOWN_PROJECT_LABEL
            ),
        )
        for script in _newest_first(scripts, key=lambda s: s.created_at)[: constants.FEED_LIMIT]
    ]

    top_performance = [s for s in scripts if s.status is ScriptStatus.APPROVED]

    return EditorView(
        awaiting_review=tuple(awaiting),
        projects_with_pending=tuple(p for p in projects if p.id in pending_project_ids),
        workflow_stats=WorkflowStats(
            draft=counts[ScriptStatus.DRAFT],
            in_review=counts[ScriptStatus.UNDER_REVIEW],
            approved=counts[ScriptStatus.APPROVED],
            needs_revision=counts[ScriptStatus.NEEDS_REVISION],
        ),
        team_activity=tuple(team_activity),
        top_performance=tuple(top_performance[: constants.TOP_PERFORMANCE_COUNT]),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# ADMIN
# ═══════════════════════════════════════════════════════════════════════════════


def admin_view(
    scripts: Sequence[Script],
    projects: Sequence[Project],
    episodes: Sequence[Episode],
    users: Sequence[User],
) -> AdminView:
    """Build global counts, the role breakdown and the platform activity feed."""
    names = _project_names(projects)
    status_counts = Counter(script.status for script in scripts)
    role_counts = Counter(user.role for user in users)
    user_status_counts = Counter(user.status for user in users)

    activity = [
        FeedItem(
            type=FeedItemType.SCRIPT,
            item_id=script.id,
            title=script.title,
            action=constants.SCRIPT_CREATED_ACTION,
            timestamp=script.created_at,
            project_name=_resolve_project_name(
                names, script.project_id, constants.UNKNOWN_PROJECT_LABEL
            ),
        )
        for script in scripts[: constants.ADMIN_FEED_SCRIPT_COUNT]
    ]
    activity.extend(
        FeedItem(
            type=FeedItemType.EPISODE,
            item_id=episode.id,
            title=episode.title,
            action=constants.EPISODE_CREATED_ACTION,
            timestamp=episode.created_at,
            project_name=_resolve_project_name(
                names, episode.project_id, constants.UNKNOWN_PROJECT_LABEL
            ),
        )
        for episode in episodes[: constants.ADMIN_FEED_EPISODE_COUNT]
    )

    languages = Counter(script.language or constants.UNKNOWN_LANGUAGE for script in scripts)

    return AdminView(
        stats=AdminStats(
            total_projects=len(projects),
            total_episodes=len(episodes),
            total_scripts=len(scripts),
            total_users=len(users),
            active_users=user_status_counts[UserStatus.VERIFIED],
            pending_reviews=status_counts[ScriptStatus.UNDER_REVIEW],
            overdue_items=status_counts[ScriptStatus.NEEDS_REVISION],
        ),
        role_breakdown=RoleBreakdown(
            admin=role_counts[UserRole.ADMIN],
            editor=role_counts[UserRole.EDITOR],
            contributor=role_counts[UserRole.CONTRIBUTOR],
            member=role_counts[UserRole.MEMBER],
            pending=user_status_counts[UserStatus.PENDING],
        ),
        activity=tuple(_newest_first(activity, key=lambda item: item.timestamp)[: constants.FEED_LIMIT]),
        status_breakdown={status.value: status_counts[status] for status in ScriptStatus},
        language_breakdown=dict(languages),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# MEMBER & OVERVIEW
# ═══════════════════════════════════════════════════════════════════════════════


def member_view(
    scripts: Sequence[Script],
    projects: Sequence[Project],
    episodes: Sequence[Episode],
    now: Optional[datetime] = None,
) -> MemberView:
    """Engagement numbers for listeners: published material and a level badge."""
    now = _resolve_now(now)
    approved = [script for script in scripts if script.status is ScriptStatus.APPROVED]
    total_content = len(approved) + len(episodes)
    cutoff = now - timedelta(days=constants.WEEKLY_WINDOW_DAYS)

    return MemberView(
        total_content=total_content,
        total_projects=len(projects),
        this_week_content=_count_since((script.updated_at for script in approved), cutoff),
        member_level=min(
            total_content // constants.MEMBER_LEVEL_STEP + 1, constants.MEMBER_LEVEL_MAX
        ),
    )


def overview_view(
    scripts: Sequence[Script],
    projects: Sequence[Project],
    episodes: Sequence[Episode],
    now: Optional[datetime] = None,
) -> OverviewView:
    """Header stats shared by every dashboard; months are UTC calendar months."""
    now = _resolve_now(now).astimezone(timezone.utc)
    this_month = sum(
        1
        for episode in episodes
        if episode.created_at is not None
        and episode.created_at.astimezone(timezone.utc).year == now.year
        and episode.created_at.astimezone(timezone.utc).month == now.month
    )
    goal = constants.MONTHLY_EPISODE_GOAL

    return OverviewView(
        active_projects=len(projects),
        episodes_this_month=this_month,
        scripts_pending=sum(1 for s in scripts if s.status in OVERVIEW_PENDING_STATUSES),
        monthly_episode_goal=goal,
        episode_progress=min(this_month / goal * 100, 100.0),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# SCRIPT ORGANIZER
# ═══════════════════════════════════════════════════════════════════════════════


def _matches_search(script: Script, needle: str) -> bool:
    haystacks = (script.title, script.description or "", script.language or "")
    return any(needle in text.lower() for text in haystacks)


def _script_group(group_key: str, members: list[Script]) -> ScriptGroup:
    ordered = sorted(members, key=lambda s: s.title.casefold())
    primary = next((s for s in ordered if s.original_script_id is None), ordered[0])
    return ScriptGroup(group_key=group_key, scripts=tuple(ordered), primary_script=primary)


def organize_scripts(
    scripts: Sequence[Script],
    projects: Sequence[Project],
    search: Optional[str] = None,
    project_id: Optional[str] = None,
) -> tuple[OrganizedProject, ...]:
    """
    Group scripts by project, then by language group.

    Scripts without a language group form a group of their own, keyed by
    the script id. With a search term only matching scripts are kept and
    projects left empty are dropped.

    Args:
        scripts: Every script in the snapshot
        projects: Every project in the snapshot (output follows this order)
        search: Case-insensitive substring over title, description, language
        project_id: Restrict the output to a single project

    Returns:
        One OrganizedProject per remaining project
    """
    needle = (search or "").strip().lower()
    organized = []

    for project in projects:
        if project_id is not None and project.id != project_id:
            continue

        project_scripts = [script for script in scripts if script.project_id == project.id]
        if needle:
            project_scripts = [s for s in project_scripts if _matches_search(s, needle)]
            if not project_scripts:
                continue

        groups: dict[str, list[Script]] = {}
        for script in project_scripts:
            groups.setdefault(script.language_group or script.id, []).append(script)

        organized.append(
            OrganizedProject(
                project=project,
                script_groups=tuple(_script_group(key, members) for key, members in groups.items()),
                total_versions=len(project_scripts),
            )
        )

    return tuple(organized)


# ═══════════════════════════════════════════════════════════════════════════════
# DISPATCH
# ═══════════════════════════════════════════════════════════════════════════════


def _admin_section(snapshot: ContentSnapshot, user: User, now: datetime) -> dict:
    return {
        "admin": admin_view(snapshot.scripts, snapshot.projects, snapshot.episodes, snapshot.users)
    }


def _editor_section(snapshot: ContentSnapshot, user: User, now: datetime) -> dict:
    return {"editor": editor_view(snapshot.scripts, snapshot.projects)}


def _contributor_section(snapshot: ContentSnapshot, user: User, now: datetime) -> dict:
    return {
        "contributor": contributor_view(
            snapshot.scripts, snapshot.projects, snapshot.episodes, user, now=now
        )
    }


def _member_section(snapshot: ContentSnapshot, user: User, now: datetime) -> dict:
    return {"member": member_view(snapshot.scripts, snapshot.projects, snapshot.episodes, now=now)}


ROLE_SECTIONS: dict[UserRole, Callable[[ContentSnapshot, User, datetime], dict]] = {
    UserRole.ADMIN: _admin_section,
    UserRole.EDITOR: _editor_section,
    UserRole.CONTRIBUTOR: _contributor_section,
    UserRole.MEMBER: _member_section,
}

ensure_exhaustive(ROLE_SECTIONS, UserRole, "ROLE_SECTIONS")


def build_dashboard(
    snapshot: ContentSnapshot,
    user: User,
    now: Optional[datetime] = None,
    view_state: Optional[ViewState] = None,
) -> DashboardResponse:
    """
    Build the dashboard for the user's role.

    Role selects what is shown; it is not an access check.
    """
    now = _resolve_now(now)
    section = ROLE_SECTIONS[user.role](snapshot, user, now)
    return DashboardResponse(
        role=user.role,
        user_id=user.id,
        overview=overview_view(snapshot.scripts, snapshot.projects, snapshot.episodes, now=now),
        view_state=view_state,
        snapshot_fetched_at=snapshot.fetched_at,
        **section,
    )
