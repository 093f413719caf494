"""Tests for the Teams chat directory endpoint."""

from httpx import AsyncClient

from searchhub.api.v1.dependencies import get_teams_chat_directory
from searchhub.application.dtos.teams import TeamsChat
from searchhub.main import app
from tests.fakes import FakeChatDirectory


async def test_list_chats_requires_user_id(client: AsyncClient) -> None:
    directory = FakeChatDirectory()
    app.dependency_overrides[get_teams_chat_directory] = lambda: directory
    response = await client.get("/api/v1/teams/chats")
    assert response.status_code == 400
    assert response.json()["details"] == {"parameter": "userId"}
    assert directory.calls == []


async def test_list_chats(client: AsyncClient) -> None:
    """Chats are returned camelCase; userId and query reach the directory."""
    directory = FakeChatDirectory(
        [
            TeamsChat(
                id="c1",
                topic="Project X",
                chat_type="group",
                web_url="https://teams.microsoft.com/l/chat/c1",
                member_count=3,
                last_updated="2024-05-01T10:00:00Z",
            )
        ]
    )
    app.dependency_overrides[get_teams_chat_directory] = lambda: directory
    response = await client.get("/api/v1/teams/chats", params={"userId": " u1 ", "query": "proj"})
    assert response.status_code == 200
    assert response.json() == {
        "chats": [
            {
                "id": "c1",
                "topic": "Project X",
                "chatType": "group",
                "webUrl": "https://teams.microsoft.com/l/chat/c1",
                "memberCount": 3,
                "lastUpdatedDateTime": "2024-05-01T10:00:00Z",
            }
        ]
    }
    assert directory.calls == [("u1", "proj")]
