import structlog

from radio_hub.api.middleware import error_handler
from radio_hub.shared.core.exceptions import ContentApiError


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "radio-content-hub"


def test_ready_reports_disabled_cache(client):
    assert client.get("/ready").json() == {"status": "ready", "cache": "disabled"}
    assert client.get("/live").json() == {"status": "alive"}


def test_my_dashboard_for_editor(client):
    response = client.get("/dashboards/me", params={"userId": "u-editor"})

    assert response.status_code == 200
    body = response.json()
    assert body["role"] == "editor"
    assert body["editor"]["workflowStats"] == {
        "draft": 1,
        "inReview": 1,
        "approved": 2,
        "needsRevision": 1,
    }
    assert body["contributor"] is None
    assert body["overview"]["activeProjects"] == 3
    assert body["viewState"] is None


def test_my_dashboard_echoes_view_state(client):
    response = client.get(
        "/dashboards/me",
        params=[("userId", "u-member"), ("theme", "dark"), ("selected", "b"), ("selected", "a")],
    )

    body = response.json()
    assert body["role"] == "member"
    assert body["viewState"] == {"theme": "dark", "isExpanded": False, "selectedIds": ["a", "b"]}


def test_unknown_user_is_404(client):
    response = client.get("/dashboards/me", params={"userId": "ghost"})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_missing_user_id_is_400(client):
    response = client.get("/dashboards/me")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_contributor_dashboard(client):
    response = client.get("/dashboards/contributor", params={"userId": "u-alice"})

    body = response.json()
    assert response.status_code == 200
    assert [s["id"] for s in body["myScripts"]] == ["s1", "s2", "s3", "s7"]
    assert body["stats"]["approvalRate"] == 25
    assert body["myScripts"][1]["languageGroup"] == "g1"


def test_contributor_dashboard_for_unlisted_author(client):
    body = client.get("/dashboards/contributor", params={"userId": "newcomer"}).json()

    assert body["myScripts"] == []
    assert body["stats"]["approvalRate"] == 0


def test_role_views(client):
    admin = client.get("/dashboards/admin").json()
    editor = client.get("/dashboards/editor").json()
    member = client.get("/dashboards/member").json()
    overview = client.get("/dashboards/overview").json()

    assert admin["roleBreakdown"]["contributor"] == 2
    assert admin["statusBreakdown"]["Needs Revision"] == 1
    assert [item["scriptId"] for item in editor["teamActivity"]] == ["s1", "s4", "s3", "s5", "s2"]
    assert member["totalContent"] == 6
    assert overview["monthlyEpisodeGoal"] == 10


def test_organized_scripts(client):
    body = client.get("/content/scripts/organized", params={"search": "intro"}).json()

    assert [entry["project"]["id"] for entry in body] == ["p1"]
    group = body[0]["scriptGroups"][0]
    assert group["groupKey"] == "g1"
    assert group["primaryScript"]["id"] == "s1"


def test_organized_scripts_unknown_project_is_404(client):
    response = client.get("/content/scripts/organized", params={"projectId": "nope"})

    assert response.status_code == 404


def test_snapshot_refresh(client, fake_snapshots):
    response = client.post("/content/snapshot/refresh")

    assert response.status_code == 200
    assert response.json()["scripts"] == 7
    assert fake_snapshots.invalidations == 1


def test_clear_snapshot_cache(client, fake_snapshots):
    response = client.delete("/content/snapshot/cache")

    assert response.json() == {"message": "Snapshot cache cleared", "success": True}
    assert fake_snapshots.invalidations == 1


def test_content_api_failure_is_502(client, fake_snapshots):
    async def failing(refresh=False):
        raise ContentApiError("scripts", "content API unreachable")

    fake_snapshots.get_snapshot = failing

    response = client.get("/dashboards/editor")

    assert response.status_code == 502
    assert response.json()["error"]["details"]["resource"] == "scripts"


def test_request_id_header_is_echoed(client):
    response = client.get("/live", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_blank_user_id_is_400(client):
    response = client.get("/dashboards/contributor", params={"userId": "   "})

    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"field": "userId"}


class RecordingLogger:
    """Captures error events together with the bound log context."""

    def __init__(self):
        self.events = []

    def error(self, event, **kwargs):
        self.events.append((event, structlog.contextvars.get_contextvars()))


def test_unexpected_error_keeps_request_id(client, fake_snapshots, monkeypatch):
    async def broken(refresh=False):
        raise RuntimeError("boom")

    fake_snapshots.get_snapshot = broken
    recorder = RecordingLogger()
    monkeypatch.setattr(error_handler, "logger", recorder)

    response = client.get("/dashboards/editor", headers={"X-Request-ID": "abc"})

    assert response.status_code == 500
    assert response.headers["X-Request-ID"] == "abc"
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"
    assert recorder.events == [("Unexpected error", {"request_id": "abc", "path": "/dashboards/editor"})]
