"""In-process TTL cache.

Used for the Teams chat listing when Redis is disabled, and in tests.
Entries expire on a monotonic clock; concurrent writers for the same key
are last-writer-wins. Values are stored as given (no serialization).
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any


class MemoryTTLCache:
    """Dict-backed cache with per-entry expiry and an optional size bound."""

    def __init__(
        self,
        default_ttl: int = 60,
        max_entries: int = 1024,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._entries: dict[str, tuple[float, Any]] = {}
        self._default_ttl = default_ttl
        self._max_entries = max_entries
        self._clock = clock

    def is_available(self) -> bool:
        return True

    async def get(self, key: str) -> Any | None:
        """Return the live value for key, dropping it if expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at <= self._clock():
            self._entries.pop(key, None)
            return None
        return value

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store value for ttl seconds (default_ttl when None)."""
        ttl = self._default_ttl if ttl is None else ttl
        if ttl <= 0:
            self._entries.pop(key, None)
            return False
        if key not in self._entries and len(self._entries) >= self._max_entries:
            self._evict()
        self._entries[key] = (self._clock() + ttl, value)
        return True

    async def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def _evict(self) -> None:
        """Drop expired entries; if still full, drop the one expiring soonest."""
        now = self._clock()
        for key in [k for k, (exp, _) in self._entries.items() if exp <= now]:
            del self._entries[key]
        if len(self._entries) >= self._max_entries:
            oldest = min(self._entries, key=lambda k: self._entries[k][0])
            del self._entries[oldest]
