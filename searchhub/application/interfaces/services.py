"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from searchhub.application.dtos.teams import TeamsChat


class IAccessTokenProvider(Protocol):
    """Resolves a Microsoft Graph bearer token for a user.

    Token acquisition and refresh belong to the OAuth subsystem; this port
    only reads what it stored. Raises UpstreamAuthException when no token
    is available.
    """

    async def get_token(self, user_id: str) -> str:
        ...


class ISpellingCorrector(Protocol):
    """Suggests a corrected query, or None when nothing should be suggested."""

    def suggest(self, query: str) -> str | None:
        ...


class ITeamsChatDirectory(Protocol):
    """Lists the Teams chats a user belongs to, optionally filtered by topic."""

    async def list_chats(self, user_id: str, query: str | None = None) -> list[TeamsChat]:
        ...
