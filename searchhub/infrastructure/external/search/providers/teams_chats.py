"""Teams chat directory with a short-lived per-user cache."""

from __future__ import annotations

from typing import Any

from searchhub.application.dtos.teams import TeamsChat
from searchhub.infrastructure.cache.cache_protocol import CacheProtocol
from searchhub.infrastructure.cache.keys import teams_chats_key
from searchhub.infrastructure.external.graph.client import GraphClient
from searchhub.infrastructure.external.search.providers._common import odata_quote
from searchhub.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_CHAT_SELECT = "id,topic,lastUpdatedDateTime,chatType,webUrl"
_MEMBERS_EXPAND = "members($select=id,displayName)"
_MAX_TOPIC_LENGTH = 30
_TRUNCATED_TOPIC_LENGTH = 27


def chat_display_topic(chat: dict[str, Any]) -> str:
    """Return the chat topic, or member names joined by ", " when it has none."""
    topic = chat.get("topic") or ""
    if topic:
        return topic
    names = [
        member["displayName"]
        for member in chat.get("members") or []
        if isinstance(member, dict) and member.get("displayName")
    ]
    topic = ", ".join(names)
    if len(topic) > _MAX_TOPIC_LENGTH:
        topic = topic[:_TRUNCATED_TOPIC_LENGTH] + "..."
    return topic or "Chat"


class TeamsChatDirectory:
    """Lists a user's Teams chats, cached per user and topic query."""

    def __init__(
        self,
        graph: GraphClient,
        cache: CacheProtocol | None = None,
        ttl: int = 60,
        top: int = 20,
    ) -> None:
        self.graph = graph
        self.cache = cache
        self.ttl = ttl
        self.top = top

    async def list_chats(self, user_id: str, query: str | None = None) -> list[TeamsChat]:
        query = (query or "").strip()
        key = teams_chats_key(user_id, query)
        cache = self.cache if self.cache is not None and self.cache.is_available() else None

        if cache is not None:
            cached = await cache.get(key)
            if isinstance(cached, list):
                logger.debug("Teams chat cache hit for user %s", user_id)
                return [TeamsChat.from_cache(item) for item in cached]

        params: dict[str, Any] = {
            "$select": _CHAT_SELECT,
            "$expand": _MEMBERS_EXPAND,
            "$top": self.top,
        }
        if query:
            params["$filter"] = f"contains(topic,'{odata_quote(query)}')"
        raw_chats = await self.graph.get_collection(user_id, "/me/chats", params)
        chats = [self._to_chat(chat) for chat in raw_chats if chat.get("id")]

        if cache is not None:
            await cache.set(key, [chat.to_cache() for chat in chats], ttl=self.ttl)
        logger.info("Listed %d Teams chats for user %s", len(chats), user_id)
        return chats

    @staticmethod
    def _to_chat(chat: dict[str, Any]) -> TeamsChat:
        return TeamsChat(
            id=str(chat["id"]),
            topic=chat_display_topic(chat),
            chat_type=chat.get("chatType") or "oneOnOne",
            web_url=chat.get("webUrl"),
            member_count=len(chat.get("members") or []),
            last_updated=chat.get("lastUpdatedDateTime"),
        )
