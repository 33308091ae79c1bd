"""
Application Settings

Centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with sensible defaults.

Configuration Categories:
=========================
- Application: Basic app info (name, version, debug mode)
- Server: Host and port settings
- CORS: Cross-origin resource sharing
- Content API: The REST collaborator that owns projects, episodes, scripts, users
- Snapshot Cache: Redis cache for fetched snapshots

Environment Variables:
======================
Settings are loaded from environment variables or .env file.
Environment variables take precedence over .env file values.

Usage:
======
    from radio_hub.config.settings import settings

    base_url = settings.CONTENT_API_BASE_URL
    is_dev = settings.is_development
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # APPLICATION
    # ═══════════════════════════════════════════════════════════════════════════════

    APP_NAME: str = "Radio Content Hub"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ═══════════════════════════════════════════════════════════════════════════════
    # SERVER
    # ═══════════════════════════════════════════════════════════════════════════════

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # ═══════════════════════════════════════════════════════════════════════════════
    # CORS
    # ═══════════════════════════════════════════════════════════════════════════════

    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # CONTENT API (REST collaborator)
    # ═══════════════════════════════════════════════════════════════════════════════

    CONTENT_API_BASE_URL: str = Field(
        default="http://localhost:5000",
        description="Base URL serving /api/projects, /api/episodes, /api/scripts, /api/users",
    )
    CONTENT_API_TOKEN: Optional[str] = Field(
        default=None,
        description="Optional bearer token forwarded to the content API",
    )
    CONTENT_API_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout for content API calls",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # SNAPSHOT CACHE - Redis
    # ═══════════════════════════════════════════════════════════════════════════════

    REDIS_URL: str = Field(
        default="redis://localhost:6379",
        description="Redis connection URL for snapshot caching",
    )
    SNAPSHOT_CACHE_ENABLED: bool = True
    SNAPSHOT_CACHE_TTL_SECONDS: int = Field(
        default=30,
        ge=0,
        description="How long a fetched snapshot is reused (0 disables caching)",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # PROPERTIES
    # ═══════════════════════════════════════════════════════════════════════════════

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings instance
    """
    return Settings()


# Global settings instance for convenient import
settings = get_settings()
