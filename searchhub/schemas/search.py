"""Search API schemas. JSON is camelCase; Python attributes stay snake_case."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from searchhub.application.dtos.search import SearchOutcome, SearchResult


class SenderResponse(BaseModel):
    name: str
    email: str = ""


class MessageLocationResponse(BaseModel):
    team: str
    channel: str


class SearchResultResponse(BaseModel):
    """Single normalized hit (file, folder, email, Teams message or Planner task)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    type: str = Field(..., description="file | folder | email | teams-message | planner")
    score: float = 0.0
    web_url: str | None = Field(default=None, alias="webUrl")
    path: str | None = None
    last_modified: str | None = Field(default=None, alias="lastModifiedDateTime")
    preview: str | None = None
    size: int | None = None
    sender: SenderResponse | None = Field(default=None, alias="from")
    location: MessageLocationResponse | None = None
    plan_id: str | None = Field(default=None, alias="planId")

    @classmethod
    def from_result(cls, r: SearchResult) -> SearchResultResponse:
        return cls(
            id=r.id,
            name=r.name,
            type=r.type.value,
            score=r.score,
            web_url=r.web_url,
            path=r.path,
            last_modified=r.last_modified,
            preview=r.preview,
            size=r.size,
            sender=SenderResponse(name=r.sender.name, email=r.sender.email) if r.sender else None,
            location=(
                MessageLocationResponse(team=r.location.team, channel=r.location.channel)
                if r.location
                else None
            ),
            plan_id=r.plan_id,
        )


class SearchResponse(BaseModel):
    """Unified search envelope."""

    model_config = ConfigDict(populate_by_name=True)

    results: list[SearchResultResponse]
    suggested_query: str | None = Field(default=None, alias="suggestedQuery")

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome) -> SearchResponse:
        return cls(
            results=[SearchResultResponse.from_result(r) for r in outcome.results],
            suggested_query=outcome.suggested_query,
        )


class WorkspaceSearchResponse(SearchResponse):
    """Workspace search envelope: the unified envelope plus the workspace id."""

    workspace: str

    @classmethod
    def from_workspace_outcome(
        cls, outcome: SearchOutcome, workspace_id: str
    ) -> WorkspaceSearchResponse:
        return cls(
            results=[SearchResultResponse.from_result(r) for r in outcome.results],
            suggested_query=outcome.suggested_query,
            workspace=workspace_id,
        )
