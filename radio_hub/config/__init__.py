"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from radio_hub.config.settings import settings

    base_url = settings.CONTENT_API_BASE_URL
    is_dev = settings.is_development
"""

from radio_hub.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
