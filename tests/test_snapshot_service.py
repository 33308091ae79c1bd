import asyncio

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from radio_hub.shared.adapters.redis_adapter import RedisAdapter
from radio_hub.shared.core.exceptions import ContentApiError
from radio_hub.shared.services.snapshot_service import SnapshotService, build_snapshot
from radio_hub.shared.utils.constants import SNAPSHOT_CACHE_KEY


class FakeRedisClient:
    """In-memory subset of the redis-py client used by RedisAdapter."""

    def __init__(self):
        self.store = {}
        self.ttls = {}

    def get(self, key):
        return self.store.get(key)

    def set(self, key, value):
        self.store[key] = value

    def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl

    def delete(self, key):
        return 1 if self.store.pop(key, None) is not None else 0

    def ping(self):
        return True


class BrokenRedisClient:
    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise RedisConnectionError("redis is down")

        return fail


class FakeAdapter:
    def __init__(self, payload):
        self.payload = payload
        self.calls = 0

    async def fetch_snapshot(self):
        self.calls += 1
        return self.payload


@pytest.fixture
def redis_client():
    return FakeRedisClient()


@pytest.fixture
def cache(redis_client):
    return RedisAdapter(url="redis://unused", client=redis_client)


def test_build_snapshot_rejects_unknown_status(payload):
    payload["scripts"][2]["status"] = "Pending Legal"

    with pytest.raises(ContentApiError) as exc_info:
        build_snapshot(payload)

    assert exc_info.value.resource == "scripts"
    assert exc_info.value.details["index"] == 2


def test_load_without_cache(payload):
    adapter = FakeAdapter(payload)
    service = SnapshotService(adapter, cache=None, ttl_seconds=30, cache_enabled=True)

    snapshot = asyncio.run(service.get_snapshot())

    assert len(snapshot.scripts) == 7
    assert service.cache_enabled is False
    assert service.invalidate() is False


def test_second_read_is_served_from_cache(payload, cache, redis_client):
    adapter = FakeAdapter(payload)
    service = SnapshotService(adapter, cache=cache, ttl_seconds=30, cache_enabled=True)

    first = asyncio.run(service.get_snapshot())
    second = asyncio.run(service.get_snapshot())

    assert adapter.calls == 1
    assert second == first
    assert redis_client.ttls[SNAPSHOT_CACHE_KEY] == 30


def test_refresh_bypasses_cache(payload, cache):
    adapter = FakeAdapter(payload)
    service = SnapshotService(adapter, cache=cache, ttl_seconds=30, cache_enabled=True)

    asyncio.run(service.get_snapshot())
    asyncio.run(service.get_snapshot(refresh=True))

    assert adapter.calls == 2


def test_zero_ttl_disables_cache(payload, cache, redis_client):
    adapter = FakeAdapter(payload)
    service = SnapshotService(adapter, cache=cache, ttl_seconds=0, cache_enabled=True)

    asyncio.run(service.get_snapshot())
    asyncio.run(service.get_snapshot())

    assert adapter.calls == 2
    assert redis_client.store == {}


def test_corrupt_cache_entry_is_discarded(payload, cache, redis_client):
    redis_client.store[SNAPSHOT_CACHE_KEY] = '{"scripts": [{"id": "s1"}]}'
    adapter = FakeAdapter(payload)
    service = SnapshotService(adapter, cache=cache, ttl_seconds=30, cache_enabled=True)

    snapshot = asyncio.run(service.get_snapshot())

    assert adapter.calls == 1
    assert len(snapshot.scripts) == 7
    assert "s2" in redis_client.store[SNAPSHOT_CACHE_KEY]


def test_unparseable_cache_entry_is_discarded(cache, redis_client):
    redis_client.store[SNAPSHOT_CACHE_KEY] = "{not json"

    assert cache.get_json(SNAPSHOT_CACHE_KEY) is None
    assert SNAPSHOT_CACHE_KEY not in redis_client.store


def test_invalidate(payload, cache, redis_client):
    service = SnapshotService(FakeAdapter(payload), cache=cache, ttl_seconds=30, cache_enabled=True)
    asyncio.run(service.get_snapshot())

    assert service.invalidate() is True
    assert SNAPSHOT_CACHE_KEY not in redis_client.store


def test_redis_outage_does_not_fail_loading(payload):
    cache = RedisAdapter(url="redis://unused", client=BrokenRedisClient())
    adapter = FakeAdapter(payload)
    service = SnapshotService(adapter, cache=cache, ttl_seconds=30, cache_enabled=True)

    snapshot = asyncio.run(service.get_snapshot())

    assert len(snapshot.projects) == 3
    assert cache.ping() is False
    assert cache.delete(SNAPSHOT_CACHE_KEY) is False
