"""Shared infrastructure dependencies: HTTP client, caches, Graph client."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

import httpx
from fastapi import Depends, Request

from searchhub.application.services.spelling_corrector import SpellingCorrector
from searchhub.core.config import get_settings
from searchhub.infrastructure.cache import CacheProtocol
from searchhub.infrastructure.external.graph import CacheAccessTokenProvider, GraphClient


def get_http_client(request: Request) -> httpx.AsyncClient | None:
    """Shared httpx client created in lifespan (None outside lifespan; GraphClient then opens its own)."""
    return getattr(request.app.state, "http_client", None)


def get_cache(request: Request) -> CacheProtocol | None:
    """Redis cache from lifespan, or None when Redis is disabled."""
    return getattr(request.app.state, "cache", None)


def get_chat_cache(request: Request) -> CacheProtocol | None:
    """Cache for Teams chat listings (Redis or in-process, chosen in lifespan)."""
    return getattr(request.app.state, "chat_cache", None)


def get_token_provider(
    cache: Annotated[CacheProtocol | None, Depends(get_cache)],
) -> CacheAccessTokenProvider:
    return CacheAccessTokenProvider(cache)


def get_graph_client(
    token_provider: Annotated[CacheAccessTokenProvider, Depends(get_token_provider)],
    http_client: Annotated[httpx.AsyncClient | None, Depends(get_http_client)],
) -> GraphClient:
    settings = get_settings()
    return GraphClient(
        token_provider,
        http_client=http_client,
        base_url=settings.graph_base_url,
        timeout=settings.graph_timeout_seconds,
    )


@lru_cache
def get_spelling_corrector() -> SpellingCorrector:
    """Process-wide corrector; the dictionary is immutable so one instance is shared."""
    return SpellingCorrector()
