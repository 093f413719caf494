"""Outlook mail search via the Microsoft Graph search API."""

from __future__ import annotations

from typing import Any

from searchhub.application.dtos.search import SearchOptions, SearchResult, Sender
from searchhub.domain.enums import ContentType
from searchhub.infrastructure.external.graph.client import GraphClient
from searchhub.infrastructure.external.search.providers._common import clean_html, hit_score
from searchhub.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class OutlookMailProvider:
    """Searches the user's mailbox (message entity)."""

    name = "outlook-mail"
    content_types = frozenset({ContentType.EMAIL})

    def __init__(self, graph: GraphClient, page_size: int = 25) -> None:
        self.graph = graph
        self.page_size = page_size

    async def search(
        self,
        user_id: str,
        query: str,
        options: SearchOptions | None = None,
    ) -> list[SearchResult]:
        query = query.strip()
        if not query:
            return []
        hits = await self.graph.search_query(user_id, "message", query, self.page_size)
        results = [
            result
            for position, hit in enumerate(hits)
            if (result := self._to_result(hit, position)) is not None
        ]
        results.sort(key=lambda r: r.score, reverse=True)
        logger.debug("Mail search returned %d results", len(results))
        return results

    @staticmethod
    def _to_result(hit: dict[str, Any], position: int) -> SearchResult | None:
        message = hit.get("resource")
        if not isinstance(message, dict) or not message.get("id"):
            return None
        address = (message.get("from") or {}).get("emailAddress") or {}
        preview = message.get("bodyPreview")
        if not preview:
            preview = clean_html((message.get("body") or {}).get("content")) or hit.get("summary")
        return SearchResult(
            id=str(message["id"]),
            name=message.get("subject") or "No Subject",
            type=ContentType.EMAIL,
            score=hit_score(hit, position),
            web_url=message.get("webLink"),
            last_modified=message.get("receivedDateTime"),
            preview=preview or "",
            sender=Sender(
                name=address.get("name") or "Unknown",
                email=address.get("address") or "",
            ),
        )
