"""
Domain Models

Read-only content records and the closed enums they use.

Model Hierarchy:
================
    ContentRecord (frozen, camelCase aliases)
       ├── Project
       ├── Episode
       ├── Script
       └── User

    ContentSnapshot  ← projects + episodes + scripts + users at one instant

Usage:
======
    from radio_hub.shared.models import ContentSnapshot, Script, ScriptStatus

    snapshot = ContentSnapshot.model_validate(raw_payload)
"""

from radio_hub.shared.models.enums import (
    ScriptStatus,
    UserRole,
    UserStatus,
    StatusBucket,
    FeedItemType,
    bucket_for,
)
from radio_hub.shared.models.entities import (
    ContentRecord,
    Project,
    Episode,
    Script,
    User,
    ContentSnapshot,
)

__all__ = [
    # Enums
    "ScriptStatus",
    "UserRole",
    "UserStatus",
    "StatusBucket",
    "FeedItemType",
    "bucket_for",
    # Entities
    "ContentRecord",
    "Project",
    "Episode",
    "Script",
    "User",
    "ContentSnapshot",
]
