"""Search API: unified Microsoft 365 search and the workspace-scoped variant."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from searchhub.api.v1.dependencies import (
    get_unified_search_service,
    get_workspace_search_service,
)
from searchhub.application.use_cases.search import UnifiedSearchService
from searchhub.application.use_cases.workspace_search import WorkspaceSearchService
from searchhub.core.limiter import limit_search
from searchhub.schemas.search import SearchResponse, WorkspaceSearchResponse

router = APIRouter()


@router.get("", response_model=SearchResponse)
@limit_search
async def search(
    request: Request,
    search_svc: Annotated[UnifiedSearchService, Depends(get_unified_search_service)],
    q: str = Query("", max_length=500, description="Free-text query; empty browses recent items"),
    user_id: str | None = Query(None, alias="userId"),
    site_id: str | None = Query(None, alias="siteId", description="Restrict to one SharePoint site"),
    content_types: str | None = Query(
        None,
        alias="contentTypes",
        description="Comma-separated: file, folder, email, teams, or file extensions (pdf, docx)",
    ),
    workspace: str | None = Query(None, description="Restrict to resources linked to this workspace"),
):
    """Search files, mail and Teams messages for one user.

    Without siteId every provider runs concurrently and a failing one is
    skipped; with siteId only SharePoint runs and its errors are returned.
    """
    outcome = await search_svc.search(
        query=q,
        user_id=user_id,
        site_id=site_id or None,
        content_types=content_types,
        workspace_id=workspace or None,
    )
    return SearchResponse.from_outcome(outcome)


@router.get("/workspace", response_model=WorkspaceSearchResponse)
@limit_search
async def search_workspace(
    request: Request,
    search_svc: Annotated[WorkspaceSearchService, Depends(get_workspace_search_service)],
    q: str | None = Query(None, max_length=500),
    query: str | None = Query(None, max_length=500, description="Alias of q"),
    user_id: str | None = Query(None, alias="userId"),
    workspace: str | None = Query(None),
):
    """Search the SharePoint sites and Planner plans linked to a workspace."""
    outcome = await search_svc.search(
        query=q or query,
        user_id=user_id,
        workspace_id=workspace,
    )
    return WorkspaceSearchResponse.from_workspace_outcome(outcome, workspace or "")
