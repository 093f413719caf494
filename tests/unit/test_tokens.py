"""CacheAccessTokenProvider: reading Graph tokens stored by the OAuth service."""

import time

import pytest

from searchhub.infrastructure.cache import MemoryTTLCache, graph_token_key
from searchhub.infrastructure.exceptions import UpstreamAuthException
from searchhub.infrastructure.external.graph import CacheAccessTokenProvider


@pytest.fixture
def cache() -> MemoryTTLCache:
    return MemoryTTLCache(default_ttl=300)


async def test_plain_string_token(cache: MemoryTTLCache) -> None:
    await cache.set(graph_token_key("u1"), "tok-abc")
    assert await CacheAccessTokenProvider(cache).get_token("u1") == "tok-abc"


async def test_token_object_not_expired(cache: MemoryTTLCache) -> None:
    await cache.set(
        graph_token_key("u1"),
        {"access_token": "tok-abc", "expires_at": time.time() + 600},
    )
    assert await CacheAccessTokenProvider(cache).get_token("u1") == "tok-abc"


async def test_expired_token_is_rejected(cache: MemoryTTLCache) -> None:
    await cache.set(
        graph_token_key("u1"),
        {"access_token": "tok-abc", "expires_at": time.time() - 10},
    )
    with pytest.raises(UpstreamAuthException) as exc_info:
        await CacheAccessTokenProvider(cache).get_token("u1")
    assert exc_info.value.status_code == 401


async def test_missing_token(cache: MemoryTTLCache) -> None:
    with pytest.raises(UpstreamAuthException) as exc_info:
        await CacheAccessTokenProvider(cache).get_token("u1")
    assert exc_info.value.details["user_id"] == "u1"


async def test_no_cache_configured() -> None:
    with pytest.raises(UpstreamAuthException):
        await CacheAccessTokenProvider(None).get_token("u1")
