"""Repository interfaces (ports) for the application layer.

All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from searchhub.application.dtos.workspace import (
        WorkspaceResourceCreate,
        WorkspaceResourceResult,
    )


class IWorkspaceResourceRepository(Protocol):
    """Protocol for the workspace resource allow-list store."""

    async def list_by_workspace(self, workspace_id: str) -> list[WorkspaceResourceResult]:
        """Return every resource linked to the workspace (oldest first)."""
        ...

    async def create(
        self, workspace_id: str, data: WorkspaceResourceCreate
    ) -> WorkspaceResourceResult:
        """Link a resource; raise DuplicateResourceException if already linked."""
        ...

    async def delete(self, workspace_id: str, resource_row_id: str) -> None:
        """Unlink a resource; raise ResourceNotFoundException if absent."""
        ...
