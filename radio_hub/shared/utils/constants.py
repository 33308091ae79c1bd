"""
Application constants.

Feed sizes, time windows and fallback labels used by the dashboards.
"""

# Feeds
FEED_LIMIT = 5
HIGHLIGHT_EPISODE_COUNT = 3
HIGHLIGHT_SCRIPT_COUNT = 2
ADMIN_FEED_SCRIPT_COUNT = 3
ADMIN_FEED_EPISODE_COUNT = 2
TOP_PERFORMANCE_COUNT = 2

# Time windows
WEEKLY_WINDOW_DAYS = 7

# Member engagement
MEMBER_LEVEL_STEP = 5
MEMBER_LEVEL_MAX = 10

# Overview
MONTHLY_EPISODE_GOAL = 10

# Fallback labels for missing relations
UNKNOWN_LABEL = "Unknown"
UNKNOWN_PROJECT_LABEL = "Unknown Project"
UNKNOWN_LANGUAGE = "unknown"

# Feed actions
EPISODE_PUBLISHED_ACTION = "Episode Published"
SCRIPT_APPROVED_ACTION = "Script Approved"
SCRIPT_CREATED_ACTION = "Script Created"
EPISODE_CREATED_ACTION = "Episode Created"

# Cache
SNAPSHOT_CACHE_KEY = "radio_hub:snapshot"
