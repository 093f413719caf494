"""Search provider and use case dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from searchhub.api.v1.dependencies.common import (
    get_chat_cache,
    get_graph_client,
    get_spelling_corrector,
)
from searchhub.api.v1.dependencies.db import get_optional_workspace_repo
from searchhub.application.interfaces.providers import SearchProvider
from searchhub.application.services.spelling_corrector import SpellingCorrector
from searchhub.application.use_cases.search import UnifiedSearchService
from searchhub.application.use_cases.workspace_search import WorkspaceSearchService
from searchhub.core.config import get_settings
from searchhub.infrastructure.cache import CacheProtocol
from searchhub.infrastructure.external.graph import GraphClient
from searchhub.infrastructure.external.search.providers import (
    OutlookMailProvider,
    PlannerTaskProvider,
    SharePointFileProvider,
    TeamsChatDirectory,
    TeamsMessageProvider,
)
from searchhub.infrastructure.persistence.repositories import WorkspaceResourceRepository

Graph = Annotated[GraphClient, Depends(get_graph_client)]


def get_file_provider(graph: Graph) -> SharePointFileProvider:
    return SharePointFileProvider(graph, page_size=get_settings().search_page_size)


def get_mail_provider(graph: Graph) -> OutlookMailProvider:
    return OutlookMailProvider(graph, page_size=get_settings().search_page_size)


def get_teams_provider(graph: Graph) -> TeamsMessageProvider:
    return TeamsMessageProvider(graph, messages_per_source=get_settings().teams_message_top)


def get_planner_provider(graph: Graph) -> PlannerTaskProvider:
    return PlannerTaskProvider(graph, task_host=get_settings().planner_task_host)


def get_search_providers(
    files: Annotated[SharePointFileProvider, Depends(get_file_provider)],
    mail: Annotated[OutlookMailProvider, Depends(get_mail_provider)],
    teams: Annotated[TeamsMessageProvider, Depends(get_teams_provider)],
) -> list[SearchProvider]:
    """Providers in merge order: files, mail, Teams."""
    return [files, mail, teams]


def get_unified_search_service(
    providers: Annotated[list[SearchProvider], Depends(get_search_providers)],
    corrector: Annotated[SpellingCorrector, Depends(get_spelling_corrector)],
    workspace_repo: Annotated[
        WorkspaceResourceRepository | None, Depends(get_optional_workspace_repo)
    ],
) -> UnifiedSearchService:
    return UnifiedSearchService(
        providers,
        corrector,
        workspace_repo=workspace_repo,
        provider_timeout=get_settings().provider_timeout_seconds,
    )


def get_workspace_search_service(
    files: Annotated[SharePointFileProvider, Depends(get_file_provider)],
    planner: Annotated[PlannerTaskProvider, Depends(get_planner_provider)],
    corrector: Annotated[SpellingCorrector, Depends(get_spelling_corrector)],
    workspace_repo: Annotated[
        WorkspaceResourceRepository | None, Depends(get_optional_workspace_repo)
    ],
) -> WorkspaceSearchService:
    return WorkspaceSearchService(files, planner, workspace_repo, corrector)


def get_teams_chat_directory(
    graph: Graph,
    cache: Annotated[CacheProtocol | None, Depends(get_chat_cache)],
) -> TeamsChatDirectory:
    settings = get_settings()
    return TeamsChatDirectory(
        graph,
        cache=cache,
        ttl=settings.teams_chat_cache_ttl,
        top=settings.teams_chat_top,
    )
