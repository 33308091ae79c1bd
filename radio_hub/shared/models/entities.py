"""
Content Entities

Read-only records fetched from the content API.

The content API owns these records; this service never creates or updates
them. Each model is frozen and accepts the API's camelCase payload
(`projectId`, `createdAt`) as well as snake_case field names.

Entity Relationships:
=====================
    Project
       ├── episodes (Episode.project_id)
       └── scripts  (Script.project_id)
                       ├── episode (Script.episode_id, optional)
                       └── author  (Script.author_id → User.id)

SAMPLE SCRIPT PAYLOAD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ "b8a7..."                                                 │
│ projectId        │ "3f1c..."                                                 │
│ authorId         │ "user_42"                                                 │
│ title            │ "Morning show intro"                                      │
│ content          │ "Good morning listeners..."                               │
│ status           │ "Under Review"                                            │
│ languageGroup    │ "grp-7" (shared by translations of one script)            │
│ createdAt        │ "2025-07-30T08:15:00.000Z"                                │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import date, datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from radio_hub.shared.models.enums import ScriptStatus, UserRole, UserStatus


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Naive timestamps from the API are UTC.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


Timestamp = Annotated[Optional[datetime], BeforeValidator(_blank_to_none), AfterValidator(_as_utc)]


class ContentRecord(BaseModel):
    """
    Base for all content API records.

    - Frozen: aggregation reads, never writes
    - camelCase aliases with population by field name
    - Unknown fields are ignored so API additions do not break loading
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    id: str


class Project(ContentRecord):
    """A show or campaign grouping episodes and scripts."""

    name: str = ""
    description: Optional[str] = None
    theme_id: Optional[str] = None
    created_at: Timestamp = None
    updated_at: Timestamp = None


class Episode(ContentRecord):
    """A single broadcast belonging to exactly one project."""

    project_id: str
    title: str = ""
    episode_number: int = 0
    description: Optional[str] = None
    broadcast_date: Annotated[Optional[date], BeforeValidator(_blank_to_none)] = None
    is_premium: bool = False
    created_at: Timestamp = None
    updated_at: Timestamp = None

    @field_validator("is_premium", mode="before")
    @classmethod
    def _null_premium(cls, value: Any) -> Any:
        return False if value is None else value


class Script(ContentRecord):
    """
    A script written by one author for a project (and optionally an episode).

    Translations of the same script share a `language_group`; the
    untranslated source has no `original_script_id`.
    """

    project_id: str
    episode_id: Optional[str] = None
    author_id: str
    title: str = ""
    content: str = ""
    status: ScriptStatus = ScriptStatus.DRAFT
    language_group: Optional[str] = None
    language: Optional[str] = None
    description: Optional[str] = None
    original_script_id: Optional[str] = None
    created_at: Timestamp = None
    updated_at: Timestamp = None

    @field_validator("content", "title", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value: Any) -> Any:
        return ScriptStatus.DRAFT if value is None else value

    @property
    def last_activity_at(self) -> Optional[datetime]:
        """When the script last changed: update time, else creation time."""
        return self.updated_at or self.created_at


class User(ContentRecord):
    """
    An account as seen by the dashboards.

    Role defaults to member, matching the content API's column default.
    When the payload has no explicit status, it is derived from the
    `isActive` / `isVerified` flags the API exposes. A status outside the
    known set becomes None.
    """

    role: UserRole = UserRole.MEMBER
    status: Optional[UserStatus] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _derive_status(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("status") is not None:
            return data
        is_active = data.get("isActive", data.get("is_active"))
        is_verified = data.get("isVerified", data.get("is_verified"))
        if is_active is None and is_verified is None:
            return data
        data = dict(data)
        if is_active is False:
            data["status"] = UserStatus.SUSPENDED
        elif is_verified:
            data["status"] = UserStatus.VERIFIED
        else:
            data["status"] = UserStatus.PENDING
        return data

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value: Any) -> Any:
        if isinstance(value, UserRole):
            return value
        if isinstance(value, str):
            try:
                return UserRole(value.strip().lower())
            except ValueError:
                pass
        return UserRole.MEMBER

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Any:
        # Unrecognized statuses count as neither active nor pending.
        if isinstance(value, UserStatus) or value is None:
            return value
        if isinstance(value, str):
            try:
                return UserStatus(value.strip().lower())
            except ValueError:
                pass
        return None


class ContentSnapshot(BaseModel):
    """
    Everything the dashboards need, fetched at one point in time.

    Treated as immutable input to aggregation; a new snapshot replaces the
    old one instead of being patched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    projects: tuple[Project, ...] = ()
    episodes: tuple[Episode, ...] = ()
    scripts: tuple[Script, ...] = ()
    users: tuple[User, ...] = ()
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def find_user(self, user_id: str) -> Optional[User]:
        """Return the user with this id, or None."""
        for user in self.users:
            if user.id == user_id:
                return user
        return None
