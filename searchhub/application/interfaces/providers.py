"""Search provider interface (port) implemented by the Graph adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from searchhub.application.dtos.search import SearchOptions, SearchResult
    from searchhub.domain.enums import ContentType


class SearchProvider(Protocol):
    """One searchable Microsoft 365 source.

    name identifies the provider in logs and spans. content_types lists the
    result types it can produce; the dispatcher only calls a provider when
    the requested types intersect them.

    search() returns [] for zero hits and raises UpstreamAuthException or
    UpstreamTransportException on failure. It never returns partial garbage.
    """

    name: str
    content_types: frozenset[ContentType]

    async def search(
        self,
        user_id: str,
        query: str,
        options: SearchOptions | None = None,
    ) -> list[SearchResult]:
        """Return normalized results for the user's query."""
        ...
