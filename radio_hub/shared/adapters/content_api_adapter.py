"""
Content API adapter - REST client for the content service.

Provides:
- Listing of projects (also the reachability check)
- Concurrent fetch of all four collections as one raw payload

Every failure (transport error, non-2xx status, malformed body) surfaces
as ContentApiError naming the collection that failed. Nothing is retried
here; callers decide whether to serve a cached snapshot instead.
"""

import asyncio
from typing import Any, Optional

import httpx

from ...config.settings import settings
from ..core.exceptions import ContentApiError
from ..core.logging import get_logger

logger = get_logger(__name__)


class ContentApiAdapter:
    """
    Adapter for the content API.

    Handles:
    - Bearer token authentication when a token is configured
    - Request timeouts
    - Translating HTTP failures into ContentApiError
    """

    RESOURCES = ("projects", "episodes", "scripts", "users")

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize content API adapter.

        Args:
            base_url: API root, e.g. http://localhost:3000. Defaults to settings.
            token: Bearer token. Defaults to settings.
            timeout: Per-request timeout in seconds. Defaults to settings.
            transport: Optional httpx transport (used to stub the API in tests)
        """
        self.base_url = (base_url or settings.CONTENT_API_BASE_URL).rstrip("/")
        self.token = token if token is not None else settings.CONTENT_API_TOKEN
        self.timeout = timeout if timeout is not None else settings.CONTENT_API_TIMEOUT_SECONDS
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _list(self, client: httpx.AsyncClient, resource: str) -> list[dict[str, Any]]:
        path = f"/api/{resource}"
        try:
            response = await client.get(path)
        except httpx.HTTPError as e:
            logger.error("Content API request failed", resource=resource, error=str(e))
            raise ContentApiError(resource, f"Request to {path} failed: {e}") from e

        if response.is_error:
            logger.error(
                "Content API returned an error",
                resource=resource,
                status_code=response.status_code,
            )
            raise ContentApiError(
                resource,
                f"{path} returned HTTP {response.status_code}",
                details={"status_code": response.status_code},
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ContentApiError(resource, f"{path} returned a non-JSON body") from e

        if not isinstance(body, list):
            raise ContentApiError(
                resource,
                f"{path} returned {type(body).__name__}, expected a list",
            )
        return body

    async def list_projects(self) -> list[dict[str, Any]]:
        async with self._client() as client:
            return await self._list(client, "projects")

    async def fetch_snapshot(self) -> dict[str, list[dict[str, Any]]]:
        """
        Fetch all four collections concurrently over one connection pool.

        Returns:
            {"projects": [...], "episodes": [...], "scripts": [...], "users": [...]}

        Raises:
            ContentApiError: If any of the requests fails
        """
        async with self._client() as client:
            results = await asyncio.gather(
                *(self._list(client, resource) for resource in self.RESOURCES)
            )

        payload = dict(zip(self.RESOURCES, results))
        logger.debug(
            "Content API fetch complete",
            **{resource: len(items) for resource, items in payload.items()},
        )
        return payload

    async def ping(self) -> bool:
        """
        Check the content API is reachable.

        Returns:
            True if the projects listing answered with a 2xx status
        """
        try:
            await self.list_projects()
            return True
        except ContentApiError:
            return False
