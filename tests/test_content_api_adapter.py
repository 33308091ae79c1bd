import asyncio

import httpx
import pytest

from radio_hub.shared.adapters.content_api_adapter import ContentApiAdapter
from radio_hub.shared.core.exceptions import ContentApiError


def make_adapter(handler, token=None):
    return ContentApiAdapter(
        base_url="http://content-api.test/",
        token=token,
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


def serve(payload, overrides=None):
    """Answer /api/<resource> from the payload, with per-path response overrides."""
    overrides = overrides or {}
    seen = []

    def handler(request):
        seen.append(request)
        if request.url.path in overrides:
            return overrides[request.url.path]
        resource = request.url.path.rsplit("/", 1)[-1]
        return httpx.Response(200, json=payload[resource])

    handler.seen = seen
    return handler


def test_fetch_snapshot_returns_all_collections(payload):
    handler = serve(payload)

    result = asyncio.run(make_adapter(handler).fetch_snapshot())

    assert set(result) == {"projects", "episodes", "scripts", "users"}
    assert result["scripts"] == payload["scripts"]
    assert sorted(r.url.path for r in handler.seen) == [
        "/api/episodes",
        "/api/projects",
        "/api/scripts",
        "/api/users",
    ]


def test_bearer_token_is_sent(payload):
    handler = serve(payload)

    asyncio.run(make_adapter(handler, token="secret").list_projects())

    assert handler.seen[0].headers["Authorization"] == "Bearer secret"


def test_no_authorization_header_without_token(payload):
    handler = serve(payload)

    asyncio.run(make_adapter(handler, token="").list_projects())

    assert "Authorization" not in handler.seen[0].headers


def test_error_status_raises_content_api_error(payload):
    handler = serve(payload, {"/api/scripts": httpx.Response(500, text="boom")})

    with pytest.raises(ContentApiError) as exc_info:
        asyncio.run(make_adapter(handler).fetch_snapshot())

    assert exc_info.value.resource == "scripts"
    assert exc_info.value.status_code == 502
    assert exc_info.value.details["status_code"] == 500


def test_non_list_body_raises(payload):
    handler = serve(payload, {"/api/users": httpx.Response(200, json={"users": []})})

    with pytest.raises(ContentApiError, match="expected a list"):
        asyncio.run(make_adapter(handler).fetch_snapshot())


def test_non_json_body_raises(payload):
    handler = serve(payload, {"/api/episodes": httpx.Response(200, text="<html>")})

    with pytest.raises(ContentApiError) as exc_info:
        asyncio.run(make_adapter(handler).fetch_snapshot())

    assert exc_info.value.resource == "episodes"


def test_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ContentApiError) as exc_info:
        asyncio.run(make_adapter(handler).list_projects())

    assert exc_info.value.to_dict()["error"]["code"] == "CONTENT_API_ERROR"


def test_ping(payload):
    assert asyncio.run(make_adapter(serve(payload)).ping()) is True

    down = serve(payload, {"/api/projects": httpx.Response(503)})
    assert asyncio.run(make_adapter(down).ping()) is False
