"""Teams channel and chat message search.

Graph has no server-side search for channel messages with delegated
permissions, so this provider lists recent messages per channel and per
chat and matches them locally. "*" matches every message and orders by
recency instead of score.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

from searchhub.application.dtos.search import (
    MessageLocation,
    SearchOptions,
    SearchResult,
    Sender,
)
from searchhub.core.constants import TEAMS_EXCERPT_LENGTH
from searchhub.domain.enums import ContentType
from searchhub.domain.exceptions import SearchHubException
from searchhub.infrastructure.external.graph.client import GraphClient
from searchhub.infrastructure.external.search.providers._common import clean_html, excerpt
from searchhub.shared.telemetry.logging import get_logger
from searchhub.shared.utils.datetime import parse_graph_datetime

logger = get_logger(__name__)

WILDCARD = "*"
_NO_TIMESTAMP = float("-inf")


@dataclass(frozen=True)
class _MessageSource:
    """One channel or chat to read messages from."""

    path: str
    location: MessageLocation


def score_message(content: str, sender_name: str, query: str) -> float:
    """Score a cleaned message against a lower-cased query.

    +100 when the content equals the query, else +50 when it contains it;
    +30 when the sender name contains it.
    """
    lowered = content.lower()
    score = 0.0
    if lowered == query:
        score += 100
    elif query in lowered:
        score += 50
    if query in sender_name.lower():
        score += 30
    return score


class TeamsMessageProvider:
    """Searches recent messages in the user's joined channels and chats."""

    name = "teams-messages"
    content_types = frozenset({ContentType.TEAMS_MESSAGE})

    def __init__(
        self,
        graph: GraphClient,
        messages_per_source: int = 50,
        max_concurrency: int = 8,
    ) -> None:
        self.graph = graph
        self.messages_per_source = messages_per_source
        self._max_concurrency = max_concurrency

    async def search(
        self,
        user_id: str,
        query: str,
        options: SearchOptions | None = None,
    ) -> list[SearchResult]:
        query = query.strip()
        if not query:
            return []
        wildcard = query == WILDCARD
        lowered = query.lower()

        semaphore = asyncio.Semaphore(self._max_concurrency)
        channel_sources, chat_sources = await asyncio.gather(
            self._channel_sources(user_id, semaphore), self._chat_sources(user_id)
        )
        sources = channel_sources + chat_sources

        async def read(source: _MessageSource) -> list[SearchResult]:
            async with semaphore:
                messages = await self._messages(user_id, source)
            return self._match(messages, source.location, lowered, wildcard)

        batches = await asyncio.gather(*(read(source) for source in sources))
        results = [result for batch in batches for result in batch]
        if wildcard:
            results.sort(key=_recency_key, reverse=True)
        else:
            results.sort(key=lambda r: r.score, reverse=True)
        logger.debug(
            "Teams search scanned %d sources, matched %d messages", len(sources), len(results)
        )
        return results

    async def _channel_sources(
        self, user_id: str, semaphore: asyncio.Semaphore
    ) -> list[_MessageSource]:
        teams = [
            team
            for team in await self.graph.get_collection(user_id, "/me/joinedTeams")
            if team.get("id")
        ]

        async def channels_of(team: dict[str, Any]) -> list[_MessageSource]:
            async with semaphore:
                try:
                    channels = await self.graph.get_collection(
                        user_id, f"/teams/{team['id']}/channels"
                    )
                except SearchHubException as e:
                    logger.warning("Skipping channels of team %s: %s", team["id"], e.message)
                    return []
            team_name = team.get("displayName") or "Unknown Team"
            return [
                _MessageSource(
                    path=f"/teams/{team['id']}/channels/{channel['id']}/messages",
                    location=MessageLocation(
                        team=team_name,
                        channel=channel.get("displayName") or "Unknown Channel",
                    ),
                )
                for channel in channels
                if channel.get("id")
            ]

        batches = await asyncio.gather(*(channels_of(team) for team in teams))
        return [source for batch in batches for source in batch]

    async def _chat_sources(self, user_id: str) -> list[_MessageSource]:
        try:
            chats = await self.graph.get_collection(user_id, "/me/chats")
        except SearchHubException as e:
            logger.warning("Skipping chat messages, chat listing failed: %s", e.message)
            return []
        return [
            _MessageSource(
                path=f"/me/chats/{chat['id']}/messages",
                location=MessageLocation(team="Chat", channel=chat.get("topic") or "Direct Message"),
            )
            for chat in chats
            if chat.get("id")
        ]

    async def _messages(self, user_id: str, source: _MessageSource) -> list[dict[str, Any]]:
        try:
            return await self.graph.get_collection(
                user_id, source.path, {"$top": self.messages_per_source}
            )
        except SearchHubException as e:
            logger.warning(
                "Skipping messages of %s / %s: %s",
                source.location.team,
                source.location.channel,
                e.message,
            )
            return []

    @staticmethod
    def _match(
        messages: list[dict[str, Any]],
        location: MessageLocation,
        query: str,
        wildcard: bool,
    ) -> list[SearchResult]:
        results: list[SearchResult] = []
        for message in messages:
            if message.get("messageType") != "message" or not message.get("id"):
                continue
            content = clean_html((message.get("body") or {}).get("content"))
            sender_name = ((message.get("from") or {}).get("user") or {}).get("displayName") or ""
            if wildcard:
                score = 0.0
            else:
                if query not in content.lower() and query not in sender_name.lower():
                    continue
                score = score_message(content, sender_name, query)
            results.append(
                SearchResult(
                    id=str(message["id"]),
                    name=excerpt(content, TEAMS_EXCERPT_LENGTH),
                    type=ContentType.TEAMS_MESSAGE,
                    score=score,
                    web_url=message.get("webUrl") or None,
                    last_modified=message.get("lastModifiedDateTime") or message.get("createdDateTime"),
                    preview=content,
                    sender=Sender(name=sender_name or "Unknown"),
                    location=location,
                )
            )
        return results


def _recency_key(result: SearchResult) -> float:
    parsed = parse_graph_datetime(result.last_modified)
    return parsed.timestamp() if parsed else _NO_TIMESTAMP
