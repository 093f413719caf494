"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the Graph client, providers, repositories
and application use cases. Routes depend only on these, never on infra
directly. Tests swap them through app.dependency_overrides.
"""

from searchhub.api.v1.dependencies.common import (
    get_cache,
    get_chat_cache,
    get_graph_client,
    get_http_client,
    get_spelling_corrector,
    get_token_provider,
)
from searchhub.api.v1.dependencies.db import (
    get_optional_workspace_repo,
    get_workspace_repo,
    get_workspace_repo_for_write,
)
from searchhub.api.v1.dependencies.search import (
    get_file_provider,
    get_mail_provider,
    get_planner_provider,
    get_search_providers,
    get_teams_chat_directory,
    get_teams_provider,
    get_unified_search_service,
    get_workspace_search_service,
)

__all__ = [
    "get_cache",
    "get_chat_cache",
    "get_file_provider",
    "get_graph_client",
    "get_http_client",
    "get_mail_provider",
    "get_optional_workspace_repo",
    "get_planner_provider",
    "get_search_providers",
    "get_spelling_corrector",
    "get_teams_chat_directory",
    "get_teams_provider",
    "get_token_provider",
    "get_unified_search_service",
    "get_workspace_repo",
    "get_workspace_repo_for_write",
    "get_workspace_search_service",
]
