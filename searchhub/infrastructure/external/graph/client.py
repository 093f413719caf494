"""Thin Microsoft Graph REST client on httpx.

Adds the user's bearer token, decodes JSON, and maps every failure to
UpstreamAuthException (401/403) or UpstreamTransportException (network,
timeout, other error status, malformed body). Providers never see httpx
exceptions.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from searchhub.application.interfaces.services import IAccessTokenProvider
from searchhub.infrastructure.exceptions import (
    UpstreamAuthException,
    UpstreamTransportException,
)
from searchhub.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

DEFAULT_GRAPH_URL = "https://graph.microsoft.com/v1.0"


def _graph_error_message(response: httpx.Response) -> str:
    """Return Graph's error.message when the body carries one, else the reason phrase."""
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase or f"HTTP {response.status_code}"
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        error = body["error"]
        return str(error.get("message") or error.get("code") or response.status_code)
    return response.reason_phrase or f"HTTP {response.status_code}"


class GraphClient:
    """Authenticated JSON calls against Microsoft Graph for a given user."""

    def __init__(
        self,
        token_provider: IAccessTokenProvider,
        *,
        http_client: httpx.AsyncClient | None = None,
        base_url: str = DEFAULT_GRAPH_URL,
        timeout: float = 30.0,
    ) -> None:
        self._tokens = token_provider
        self._shared_http = http_client
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @asynccontextmanager
    async def _http_cm(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield shared HTTP client or a short-lived one (connection reuse when shared)."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client

    def _url(self, path: str) -> str:
        if path.startswith("https://") or path.startswith("http://"):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        user_id: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send one Graph request and return the decoded JSON object."""
        token = await self._tokens.get_token(user_id)
        url = self._url(path)
        headers = {"Authorization": f"Bearer {token}", "Accept": "application/json"}
        try:
            async with self._http_cm() as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=headers,
                    timeout=self._timeout,
                )
        except httpx.TimeoutException as e:
            raise UpstreamTransportException("request timed out", path) from e
        except httpx.HTTPError as e:
            raise UpstreamTransportException(f"network error: {e}", path) from e

        if response.status_code in (401, 403):
            raise UpstreamAuthException(
                _graph_error_message(response), response.status_code, user_id
            )
        if response.status_code >= 400:
            raise UpstreamTransportException(
                _graph_error_message(response), path, response.status_code
            )
        if response.status_code == 204 or not response.content:
            return {}
        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamTransportException("malformed JSON in response", path) from e
        if not isinstance(body, dict):
            raise UpstreamTransportException("unexpected response payload", path)
        return body

    async def get(
        self, user_id: str, path: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self.request("GET", user_id, path, params=params)

    async def post(self, user_id: str, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        return await self.request("POST", user_id, path, json=payload)

    async def get_collection(
        self, user_id: str, path: str, params: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """GET a collection endpoint and return its "value" list (first page only)."""
        body = await self.get(user_id, path, params)
        value = body.get("value", [])
        if not isinstance(value, list):
            raise UpstreamTransportException("collection 'value' is not a list", path)
        return [item for item in value if isinstance(item, dict)]

    async def search_query(
        self, user_id: str, entity_type: str, query_string: str, size: int
    ) -> list[dict[str, Any]]:
        """POST /search/query for one entity type and return the flattened hits."""
        payload = {
            "requests": [
                {
                    "entityTypes": [entity_type],
                    "query": {"queryString": query_string},
                    "from": 0,
                    "size": size,
                }
            ]
        }
        body = await self.post(user_id, "/search/query", payload)
        responses = body.get("value", [])
        if not isinstance(responses, list):
            raise UpstreamTransportException("search response 'value' is not a list", "/search/query")
        hits: list[dict[str, Any]] = []
        for response in responses:
            for container in (response or {}).get("hitsContainers", []) or []:
                for hit in (container or {}).get("hits", []) or []:
                    if isinstance(hit, dict):
                        hits.append(hit)
        return hits
