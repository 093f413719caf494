"""Cache: Redis service, in-process TTL cache and key builders."""

from searchhub.infrastructure.cache.cache_protocol import CacheProtocol
from searchhub.infrastructure.cache.keys import graph_token_key, teams_chats_key
from searchhub.infrastructure.cache.memory_cache import MemoryTTLCache
from searchhub.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheProtocol",
    "CacheService",
    "MemoryTTLCache",
    "graph_token_key",
    "teams_chats_key",
]
