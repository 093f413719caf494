"""Cache protocol shared by the Redis and in-process caches."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for cache backends. Values are JSON-compatible."""

    def is_available(self) -> bool:
        """Return True if cache is connected and usable."""
        ...

    async def get(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL in seconds; return True when stored."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove key from cache; return True when removed."""
        ...
