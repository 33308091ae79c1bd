"""
Enums used across the application.

Statuses and roles arrive from the content API as plain strings. They are
parsed into closed enums at the loading stage so that every aggregation
branch works against a known set of values.
"""

from enum import Enum


class ScriptStatus(str, Enum):
    """
    Editorial status of a script.

    An unordered label set: any script may move to any status, there is no
    enforced transition graph.
    """

    DRAFT = "Draft"
    IN_PROGRESS = "In Progress"
    SUBMITTED = "Submitted"
    UNDER_REVIEW = "Under Review"
    NEEDS_REVISION = "Needs Revision"
    APPROVED = "Approved"
    PUBLISHED = "Published"
    ARCHIVED = "Archived"


class UserRole(str, Enum):
    """Role that selects which dashboard a user sees."""

    ADMIN = "admin"
    EDITOR = "editor"
    CONTRIBUTOR = "contributor"
    MEMBER = "member"


class UserStatus(str, Enum):
    """Account verification state."""

    VERIFIED = "verified"
    PENDING = "pending"
    SUSPENDED = "suspended"


class StatusBucket(str, Enum):
    """Where a script lands in the contributor's personal workflow."""

    ACTIVE = "active"
    NEEDS_REVISION = "needs_revision"
    SUBMITTED = "submitted"
    NONE = "none"


class FeedItemType(str, Enum):
    """Entity type behind a highlight or activity feed entry."""

    EPISODE = "episode"
    SCRIPT = "script"


# Every status must appear exactly once; checked below at import time.
CONTRIBUTOR_BUCKETS: dict[ScriptStatus, StatusBucket] = {
    ScriptStatus.DRAFT: StatusBucket.ACTIVE,
    ScriptStatus.IN_PROGRESS: StatusBucket.ACTIVE,
    ScriptStatus.NEEDS_REVISION: StatusBucket.NEEDS_REVISION,
    ScriptStatus.SUBMITTED: StatusBucket.SUBMITTED,
    ScriptStatus.UNDER_REVIEW: StatusBucket.SUBMITTED,
    ScriptStatus.APPROVED: StatusBucket.SUBMITTED,
    ScriptStatus.PUBLISHED: StatusBucket.NONE,
    ScriptStatus.ARCHIVED: StatusBucket.NONE,
}

AWAITING_REVIEW_STATUSES = frozenset({ScriptStatus.UNDER_REVIEW, ScriptStatus.SUBMITTED})

PENDING_WORK_STATUSES = frozenset(
    {ScriptStatus.DRAFT, ScriptStatus.UNDER_REVIEW, ScriptStatus.NEEDS_REVISION}
)

OVERVIEW_PENDING_STATUSES = frozenset(
    {ScriptStatus.UNDER_REVIEW, ScriptStatus.SUBMITTED, ScriptStatus.DRAFT}
)


def bucket_for(status: ScriptStatus) -> StatusBucket:
    """Return the contributor workflow bucket for a status."""
    return CONTRIBUTOR_BUCKETS[status]


def ensure_exhaustive(mapping: dict, enum_cls: type[Enum], name: str) -> None:
    """
    Fail loudly when a lookup table does not cover every enum member.

    Adding a new status or role without deciding where it belongs breaks
    the import instead of silently falling into a default bucket.
    """
    missing = [member.value for member in enum_cls if member not in mapping]
    if missing:
        raise RuntimeError(f"{name} is missing entries for: {', '.join(missing)}")


ensure_exhaustive(CONTRIBUTOR_BUCKETS, ScriptStatus, "CONTRIBUTOR_BUCKETS")
