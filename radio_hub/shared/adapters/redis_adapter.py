"""
Redis adapter - Snapshot caching.

Provides:
- Key-value caching with TTL
- JSON helpers for cached snapshots

Cache failures never fail a request: every operation logs and reports a
miss instead of raising.
"""

import functools
import json
from typing import Any, Optional

import redis
from redis.exceptions import RedisError

from ...config.settings import settings
from ..core.logging import get_logger

logger = get_logger(__name__)


class RedisAdapter:
    """
    Adapter for Redis operations.

    The client is created on first use, so constructing the adapter never
    touches the network.
    """

    def __init__(self, url: Optional[str] = None, client: Optional[redis.Redis] = None):
        """
        Initialize Redis adapter.

        Args:
            url: Redis URL (redis://host:port/db)
            client: Pre-built client, bypassing URL-based construction
        """
        self.url = url or settings.REDIS_URL
        self._client = client

    @property
    def client(self) -> redis.Redis:
        """Lazy-loaded Redis client."""
        if self._client is None:
            self._client = redis.from_url(self.url, decode_responses=True)
        return self._client

    def get(self, key: str) -> Optional[str]:
        """
        Get a value from cache.

        Returns:
            Cached value or None
        """
        try:
            return self.client.get(key)
        except RedisError as e:
            logger.warning("Redis get failed", key=key, error=str(e))
            return None

    def get_json(self, key: str) -> Optional[Any]:
        """
        Get a JSON value from cache.

        Returns:
            Parsed JSON, or None when missing or unparseable
        """
        value = self.get(key)
        if not value:
            return None
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            logger.warning("Discarding unparseable cache entry", key=key)
            self.delete(key)
            return None

    def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        """
        Set a value in cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time-to-live in seconds (no expiry when falsy)

        Returns:
            True if successful
        """
        try:
            if ttl:
                self.client.setex(key, ttl, value)
            else:
                self.client.set(key, value)
            return True
        except RedisError as e:
            logger.warning("Redis set failed", key=key, error=str(e))
            return False

    def set_json(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        return self.set(key, json.dumps(value), ttl)

    def delete(self, key: str) -> bool:
        """
        Delete a key from cache.

        Returns:
            True if a key was deleted
        """
        try:
            return bool(self.client.delete(key))
        except RedisError as e:
            logger.warning("Redis delete failed", key=key, error=str(e))
            return False

    def ping(self) -> bool:
        """
        Check Redis connectivity.

        Returns:
            True if connected
        """
        try:
            return bool(self.client.ping())
        except RedisError:
            return False


@functools.lru_cache(maxsize=1)
def get_redis_adapter() -> RedisAdapter:
    """Get or create Redis adapter singleton."""
    return RedisAdapter()
