"""Application DTOs (dataclasses shared by use cases, providers and repositories)."""

from searchhub.application.dtos.search import (
    ContentTypeFilter,
    MessageLocation,
    SearchOptions,
    SearchOutcome,
    SearchResult,
    Sender,
)
from searchhub.application.dtos.teams import TeamsChat
from searchhub.application.dtos.workspace import (
    WorkspaceResourceCreate,
    WorkspaceResourceResult,
)

__all__ = [
    "ContentTypeFilter",
    "MessageLocation",
    "SearchOptions",
    "SearchOutcome",
    "SearchResult",
    "Sender",
    "TeamsChat",
    "WorkspaceResourceCreate",
    "WorkspaceResourceResult",
]
