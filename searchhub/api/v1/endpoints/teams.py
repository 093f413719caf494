"""Teams chat directory API."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from searchhub.api.v1.dependencies import get_teams_chat_directory
from searchhub.application.interfaces.services import ITeamsChatDirectory
from searchhub.domain.exceptions import MissingParameterException
from searchhub.schemas.teams import TeamsChatListResponse, TeamsChatResponse

router = APIRouter()


@router.get("/chats", response_model=TeamsChatListResponse)
async def list_chats(
    directory: Annotated[ITeamsChatDirectory, Depends(get_teams_chat_directory)],
    user_id: str | None = Query(None, alias="userId"),
    query: str | None = Query(None, max_length=200, description="Filter on chat topic"),
):
    """List the user's Teams chats (cached briefly per user and query)."""
    if not user_id or not user_id.strip():
        raise MissingParameterException("userId")
    chats = await directory.list_chats(user_id.strip(), query)
    return TeamsChatListResponse(
        chats=[
            TeamsChatResponse(
                id=c.id,
                topic=c.topic,
                chat_type=c.chat_type,
                web_url=c.web_url,
                member_count=c.member_count,
                last_updated=c.last_updated,
            )
            for c in chats
        ]
    )
