"""
HTTP client for Yuque API operations.

Provides a singleton AsyncClient with connection pooling shared by every
YuqueHttpClient. Auth headers are passed per request, so document
services hold no connections of their own.
"""

import logging
from typing import Any, Protocol

import httpx

from clipper.config import settings
from clipper.services.yuque.constants import AUTH_HEADER
from clipper.services.yuque.exceptions import RemoteRequestError
from clipper.services.yuque.helpers import handle_error_response, unwrap_data

logger = logging.getLogger(__name__)

# Module-level singleton client
_client: httpx.AsyncClient | None = None


def get_yuque_client() -> httpx.AsyncClient:
    """
    Get or create the shared HTTP client for Yuque API calls.

    Returns:
        Shared httpx.AsyncClient configured with timeouts and pool limits
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.http_timeout, connect=settings.http_connect_timeout),
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        )
        logger.debug("Created new Yuque HTTP client with connection pooling")
    return _client


async def close_yuque_client() -> None:
    """
    Close the shared HTTP client.

    Call on app shutdown for graceful termination.
    """
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
        _client = None
        logger.debug("Closed Yuque HTTP client")


class RemoteAccessor(Protocol):
    """Authenticated GET/POST/PUT returning decoded JSON."""

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any: ...

    async def post(self, path: str, json: dict[str, Any]) -> Any: ...

    async def put(self, path: str, json: dict[str, Any]) -> Any: ...


class YuqueHttpClient:
    """
    Default RemoteAccessor backed by httpx.

    Relative paths resolve against the v2 API base URL; absolute URLs are
    sent as is (the outline endpoint lives outside the v2 prefix). Uses the
    shared client unless one is passed in.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = httpx.URL(base_url or settings.yuque_base_url)
        self._headers = {AUTH_HEADER: access_token}
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client or get_yuque_client()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, json: dict[str, Any]) -> Any:
        return await self._request("POST", path, json=json)

    async def put(self, path: str, json: dict[str, Any]) -> Any:
        return await self._request("PUT", path, json=json)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = self.base_url.join(path)
        try:
            response = await self.client.request(method, url, headers=self._headers, **kwargs)
        except httpx.TimeoutException as e:
            raise RemoteRequestError(f"Yuque request timed out: {method} {path}") from e
        except httpx.HTTPError as e:
            raise RemoteRequestError(f"Yuque request failed: {method} {path}: {e}") from e

        handle_error_response(response, path)
        if not response.content:
            return None
        try:
            return unwrap_data(response.json())
        except ValueError as e:
            raise RemoteRequestError(
                f"Invalid JSON from Yuque: {method} {path}", response.status_code
            ) from e
