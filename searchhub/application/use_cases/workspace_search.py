"""Workspace-scoped search: SharePoint files and Planner tasks linked to one workspace."""

from __future__ import annotations

from typing import TYPE_CHECKING

from searchhub.application.dtos.search import SearchOptions, SearchOutcome, SearchResult
from searchhub.application.services.result_merger import merge_results
from searchhub.application.services.workspace_filter import WorkspaceResourceFilter
from searchhub.domain.enums import ContentType
from searchhub.domain.exceptions import (
    MissingParameterException,
    SqlNotConfiguredException,
)
from searchhub.shared.telemetry.logging import get_logger
from searchhub.shared.telemetry.tracing import TracedOperation, set_span_error, traced

if TYPE_CHECKING:
    from searchhub.application.interfaces.providers import SearchProvider
    from searchhub.application.interfaces.repositories import IWorkspaceResourceRepository
    from searchhub.application.interfaces.services import ISpellingCorrector

logger = get_logger(__name__)

_FILE_OPTIONS = SearchOptions(content_types=frozenset({ContentType.FILE, ContentType.FOLDER}))
_PLANNER_OPTIONS = SearchOptions(content_types=frozenset({ContentType.PLANNER}))


class WorkspaceSearchService:
    """Search only what a workspace links to.

    SharePoint results must match a linked site (id or URL); Planner tasks
    must belong to a linked plan. Unlike unified search, Planner tasks are
    returned here. A Planner failure is logged and skipped; a SharePoint
    failure fails the request.
    """

    def __init__(
        self,
        file_provider: SearchProvider,
        planner_provider: SearchProvider,
        workspace_repo: IWorkspaceResourceRepository | None,
        corrector: ISpellingCorrector,
    ) -> None:
        self.file_provider = file_provider
        self.planner_provider = planner_provider
        self.workspace_repo = workspace_repo
        self.corrector = corrector

    @traced("search.workspace")
    async def search(
        self,
        *,
        query: str | None,
        user_id: str | None,
        workspace_id: str | None,
    ) -> SearchOutcome:
        query = (query or "").strip()
        if not query:
            raise MissingParameterException("query")
        if not workspace_id:
            raise MissingParameterException("workspace")
        if not user_id or not user_id.strip():
            raise MissingParameterException("userId")
        user_id = user_id.strip()
        if self.workspace_repo is None:
            raise SqlNotConfiguredException()

        resources = await self.workspace_repo.list_by_workspace(workspace_id)
        if not resources:
            logger.info("Workspace %s has no linked resources", workspace_id)
            return SearchOutcome(results=[], suggested_query=self.corrector.suggest(query))

        allow = WorkspaceResourceFilter(resources)
        file_results: list[SearchResult] = []
        planner_results: list[SearchResult] = []

        if allow.has_sharepoint:
            async with TracedOperation("search.provider", {"provider": self.file_provider.name}):
                found = await self.file_provider.search(user_id, query, _FILE_OPTIONS)
            file_results = allow.apply(found)

        if allow.has_planner:
            async with TracedOperation("search.provider", {"provider": self.planner_provider.name}):
                try:
                    found = await self.planner_provider.search(user_id, query, _PLANNER_OPTIONS)
                except Exception as e:
                    set_span_error(e)
                    logger.warning(
                        "Planner search failed for workspace %s (user_id=%s, query=%r): %s",
                        workspace_id,
                        user_id,
                        query,
                        e,
                    )
                    found = []
            planner_results = allow.apply(found)

        logger.info(
            "Workspace %s search matched %d files and %d tasks",
            workspace_id,
            len(file_results),
            len(planner_results),
        )
        return SearchOutcome(
            results=merge_results(file_results, planner_results),
            suggested_query=self.corrector.suggest(query),
        )
