"""Application use cases: unified and workspace-scoped search."""

from searchhub.application.use_cases.search import UnifiedSearchService, parse_content_types
from searchhub.application.use_cases.workspace_search import WorkspaceSearchService

__all__ = [
    "UnifiedSearchService",
    "WorkspaceSearchService",
    "parse_content_types",
]
