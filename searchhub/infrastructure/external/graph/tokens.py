"""Graph access token lookup.

The OAuth service (out of scope here) stores each user's delegated token
in the shared cache under graph_token:<user_id>, either as a bare string
or as {"access_token": ..., "expires_at": <unix seconds>}. This module
only reads it.
"""

from __future__ import annotations

from typing import Any

from searchhub.infrastructure.cache.cache_protocol import CacheProtocol
from searchhub.infrastructure.cache.keys import graph_token_key
from searchhub.infrastructure.exceptions import UpstreamAuthException
from searchhub.shared.telemetry.logging import get_logger
from searchhub.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class CacheAccessTokenProvider:
    """Reads Graph bearer tokens from the shared cache."""

    def __init__(self, cache: CacheProtocol | None) -> None:
        self._cache = cache

    async def get_token(self, user_id: str) -> str:
        """Return the user's bearer token.

        Raises:
            UpstreamAuthException: cache unavailable, no token stored, or token expired.
        """
        if self._cache is None or not self._cache.is_available():
            raise UpstreamAuthException("token store unavailable", 401, user_id)
        stored: Any = await self._cache.get(graph_token_key(user_id))
        token = self._extract(stored, user_id)
        if not token:
            logger.info("No Microsoft Graph token stored for user %s", user_id)
            raise UpstreamAuthException("no Microsoft Graph token for user", 401, user_id)
        return token

    @staticmethod
    def _extract(stored: Any, user_id: str) -> str | None:
        if isinstance(stored, str):
            return stored or None
        if isinstance(stored, dict):
            expires_at = stored.get("expires_at")
            if isinstance(expires_at, (int, float)) and expires_at <= utc_now().timestamp():
                raise UpstreamAuthException("Microsoft Graph token expired", 401, user_id)
            token = stored.get("access_token")
            return token if isinstance(token, str) and token else None
        return None
