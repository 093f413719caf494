"""Repositories: SQL access returning application DTOs."""

from searchhub.infrastructure.persistence.repositories.workspace_resource_repo import (
    WorkspaceResourceRepository,
)

__all__ = ["WorkspaceResourceRepository"]
