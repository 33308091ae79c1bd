"""
Snapshot Service

Loads a ContentSnapshot from the content API, optionally through a short
Redis cache.

LOADING FLOW:
1. Read `radio_hub:snapshot` from Redis (when caching is enabled)
2. On a miss, fetch all four collections concurrently
3. Validate every record; any invalid record fails the whole load
4. Store the validated snapshot back with the configured TTL

A cached entry that no longer validates is deleted and treated as a miss.
Cache trouble never fails a request; content API trouble always does.

Usage:
======
    from radio_hub.shared.services.snapshot_service import SnapshotService

    service = SnapshotService(ContentApiAdapter(), RedisAdapter())
    snapshot = await service.get_snapshot()
"""

from typing import Any, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...config.settings import settings
from ..adapters.content_api_adapter import ContentApiAdapter
from ..adapters.redis_adapter import RedisAdapter
from ..core.exceptions import ContentApiError
from ..core.logging import get_logger
from ..models.entities import ContentSnapshot, Episode, Project, Script, User
from ..utils.constants import SNAPSHOT_CACHE_KEY

logger = get_logger(__name__)

RECORD_MODELS: dict[str, type[BaseModel]] = {
    "projects": Project,
    "episodes": Episode,
    "scripts": Script,
    "users": User,
}


def _summarize_errors(error: PydanticValidationError, limit: int = 5) -> list[dict[str, Any]]:
    return [
        {"loc": [str(part) for part in err["loc"]], "msg": err["msg"]}
        for err in error.errors()[:limit]
    ]


def build_snapshot(payload: dict[str, list[dict[str, Any]]]) -> ContentSnapshot:
    """
    Validate raw API collections into a ContentSnapshot.

    Args:
        payload: Raw lists keyed by resource name

    Returns:
        Validated, frozen snapshot

    Raises:
        ContentApiError: If any record fails validation (e.g. unknown status)
    """
    collections = {}
    for resource, model in RECORD_MODELS.items():
        records = []
        for index, item in enumerate(payload.get(resource, [])):
            try:
                records.append(model.model_validate(item))
            except PydanticValidationError as e:
                logger.error(
                    "Content API record failed validation",
                    resource=resource,
                    index=index,
                    errors=e.error_count(),
                )
                raise ContentApiError(
                    resource,
                    f"Record {index} of {resource} failed validation",
                    details={"index": index, "errors": _summarize_errors(e)},
                ) from e
        collections[resource] = tuple(records)
    return ContentSnapshot(**collections)


class SnapshotService:
    """
    Service that owns snapshot loading and caching.

    Handles:
    - Fetching through the content API adapter
    - Record validation
    - Best-effort caching in Redis
    """

    def __init__(
        self,
        adapter: ContentApiAdapter,
        cache: Optional[RedisAdapter] = None,
        ttl_seconds: Optional[int] = None,
        cache_enabled: Optional[bool] = None,
    ) -> None:
        """
        Initialize SnapshotService.

        Args:
            adapter: Content API adapter
            cache: Redis adapter; no caching when None
            ttl_seconds: Cache TTL, 0 disables caching. Defaults to settings.
            cache_enabled: Master switch. Defaults to settings.
        """
        self.adapter = adapter
        self.cache = cache
        self.ttl_seconds = (
            settings.SNAPSHOT_CACHE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        )
        enabled = settings.SNAPSHOT_CACHE_ENABLED if cache_enabled is None else cache_enabled
        self.cache_enabled = bool(enabled and cache is not None and self.ttl_seconds > 0)

    async def get_snapshot(self, refresh: bool = False) -> ContentSnapshot:
        """
        Return the current snapshot.

        Args:
            refresh: Skip the cache read and always hit the content API

        Raises:
            ContentApiError: If the content API fails or returns invalid records
        """
        if not refresh:
            cached = self._read_cache()
            if cached is not None:
                return cached

        snapshot = await self.load()
        self._write_cache(snapshot)
        return snapshot

    async def load(self) -> ContentSnapshot:
        """Fetch and validate a fresh snapshot, bypassing the cache entirely."""
        payload = await self.adapter.fetch_snapshot()
        snapshot = build_snapshot(payload)
        logger.info(
            "Snapshot loaded",
            projects=len(snapshot.projects),
            episodes=len(snapshot.episodes),
            scripts=len(snapshot.scripts),
            users=len(snapshot.users),
        )
        return snapshot

    def invalidate(self) -> bool:
        """Drop the cached snapshot. Returns True if an entry was removed."""
        if self.cache is None:
            return False
        return self.cache.delete(SNAPSHOT_CACHE_KEY)

    # ═══════════════════════════════════════════════════════════════════════════
    # CACHE
    # ═══════════════════════════════════════════════════════════════════════════

    def _read_cache(self) -> Optional[ContentSnapshot]:
        if not self.cache_enabled:
            return None

        data = self.cache.get_json(SNAPSHOT_CACHE_KEY)
        if data is None:
            logger.debug("Snapshot cache miss")
            return None

        try:
            snapshot = ContentSnapshot.model_validate(data)
        except PydanticValidationError:
            logger.warning("Discarding invalid cached snapshot")
            self.cache.delete(SNAPSHOT_CACHE_KEY)
            return None

        logger.debug("Snapshot cache hit", fetched_at=snapshot.fetched_at.isoformat())
        return snapshot

    def _write_cache(self, snapshot: ContentSnapshot) -> None:
        if not self.cache_enabled:
            return
        self.cache.set_json(
            SNAPSHOT_CACHE_KEY,
            snapshot.model_dump(mode="json", by_alias=True),
            ttl=self.ttl_seconds,
        )
