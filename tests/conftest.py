import os

os.environ.setdefault("APP_ENV", "test")
os.environ["SNAPSHOT_CACHE_ENABLED"] = "false"
os.environ.setdefault("CONTENT_API_BASE_URL", "http://content-api.test")

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from radio_hub.api.dependencies.services import get_snapshot_service
from radio_hub.api.main import app
from radio_hub.shared.services.snapshot_service import build_snapshot

NOW = datetime(2025, 8, 6, 12, 0, tzinfo=timezone.utc)


def raw_payload():
    """Content API arrays as the REST service returns them (camelCase, ISO strings)."""
    return {
        "projects": [
            {"id": "p1", "name": "Morning Show", "description": "Daily breakfast programme"},
            {"id": "p2", "name": "Evening News"},
            {"id": "p3", "name": "Weekend Special"},
        ],
        "episodes": [
            {"id": "e1", "projectId": "p1", "title": "Ep 1", "episodeNumber": 1,
             "createdAt": "2025-08-01T09:00:00.000Z"},
            {"id": "e2", "projectId": "p1", "title": "Ep 2", "episodeNumber": 2,
             "createdAt": "2025-07-20T09:00:00.000Z", "isPremium": None},
            {"id": "e3", "projectId": "p2", "title": "Ep 3", "episodeNumber": 1,
             "createdAt": "2025-08-05T18:30:00.000Z", "broadcastDate": "2025-08-07"},
            {"id": "e4", "projectId": "p-missing", "title": "Orphan", "episodeNumber": 9,
             "createdAt": "2025-06-01T09:00:00.000Z"},
        ],
        "scripts": [
            {"id": "s1", "projectId": "p1", "authorId": "u-alice", "title": "Intro",
             "content": "abcd", "status": "Draft", "language": "en", "languageGroup": "g1",
             "createdAt": "2025-08-05T08:00:00.000Z"},
            {"id": "s2", "projectId": "p1", "authorId": "u-alice", "title": "intro (es)",
             "content": "0123456789", "status": "Approved", "language": "es",
             "languageGroup": "g1", "originalScriptId": "s1",
             "createdAt": "2025-07-01T08:00:00.000Z", "updatedAt": "2025-08-04T08:00:00.000Z"},
            {"id": "s3", "projectId": "p2", "authorId": "u-alice", "title": "News brief",
             "content": "", "status": "Needs Revision", "language": "en",
             "createdAt": "2025-08-02T08:00:00.000Z"},
            {"id": "s4", "projectId": "p2", "authorId": "u-bob", "title": "Weather",
             "content": "Sunny", "status": "Under Review", "language": "en",
             "createdAt": "2025-08-03T08:00:00.000Z"},
            {"id": "s5", "projectId": "p1", "authorId": "u-bob", "title": "Traffic",
             "content": "Jams", "status": "Submitted", "language": None,
             "createdAt": "2025-07-15T08:00:00.000Z"},
            {"id": "s6", "projectId": "p-missing", "authorId": "u-bob", "title": "Lost",
             "content": "?", "status": "Approved", "language": "fr",
             "createdAt": "2025-06-01T08:00:00.000Z", "updatedAt": None},
            {"id": "s7", "projectId": "p2", "authorId": "u-alice", "title": "Sports",
             "content": None, "status": "Published", "createdAt": None},
        ],
        "users": [
            {"id": "u-admin", "role": "admin", "isActive": True, "isVerified": True},
            {"id": "u-editor", "role": "Editor", "status": "verified"},
            {"id": "u-alice", "role": "contributor", "status": "pending"},
            {"id": "u-bob", "role": "contributor", "isActive": False, "isVerified": True},
            {"id": "u-member", "role": "listener"},
        ],
    }


class FakeSnapshotService:
    """Stands in for SnapshotService: serves a fixed snapshot, counts calls."""

    def __init__(self, snapshot):
        self.snapshot = snapshot
        self.loads = 0
        self.invalidations = 0

    async def get_snapshot(self, refresh=False):
        self.loads += 1
        return self.snapshot

    def invalidate(self):
        self.invalidations += 1
        return True


@pytest.fixture
def payload():
    return raw_payload()


@pytest.fixture
def snapshot():
    return build_snapshot(raw_payload())


@pytest.fixture
def fake_snapshots(snapshot):
    return FakeSnapshotService(snapshot)


@pytest.fixture
def client(fake_snapshots):
    app.dependency_overrides[get_snapshot_service] = lambda: fake_snapshots
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def now():
    return NOW
