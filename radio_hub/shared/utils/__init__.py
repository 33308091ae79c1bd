"""
Utilities Package

Common constants and helpers.

Contents:
=========
- constants: Feed sizes, time windows, fallback labels

Usage:
======
    from radio_hub.shared.utils.constants import FEED_LIMIT, UNKNOWN_PROJECT_LABEL
"""

from radio_hub.shared.utils.constants import (
    FEED_LIMIT,
    WEEKLY_WINDOW_DAYS,
    MONTHLY_EPISODE_GOAL,
    UNKNOWN_LABEL,
    UNKNOWN_PROJECT_LABEL,
    SNAPSHOT_CACHE_KEY,
)

__all__ = [
    "FEED_LIMIT",
    "WEEKLY_WINDOW_DAYS",
    "MONTHLY_EPISODE_GOAL",
    "UNKNOWN_LABEL",
    "UNKNOWN_PROJECT_LABEL",
    "SNAPSHOT_CACHE_KEY",
]
