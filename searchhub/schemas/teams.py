"""Teams chat directory API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class TeamsChatResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    topic: str
    chat_type: str = Field(default="oneOnOne", alias="chatType")
    web_url: str | None = Field(default=None, alias="webUrl")
    member_count: int = Field(default=0, alias="memberCount")
    last_updated: str | None = Field(default=None, alias="lastUpdatedDateTime")


class TeamsChatListResponse(BaseModel):
    chats: list[TeamsChatResponse]
