"""Workspace resource repository. Returns application DTOs."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from searchhub.application.dtos.workspace import (
    WorkspaceResourceCreate,
    WorkspaceResourceResult,
)
from searchhub.domain.enums import ResourceType
from searchhub.domain.exceptions import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from searchhub.infrastructure.persistence.models.workspace_resource import WorkspaceResource


def _to_result(r: WorkspaceResource) -> WorkspaceResourceResult:
    """Map ORM to WorkspaceResourceResult."""
    return WorkspaceResourceResult(
        id=r.id,
        workspace_id=r.workspace_id,
        resource_type=ResourceType(r.resource_type),
        resource_id=r.resource_id,
        resource_url=r.resource_url,
        name=r.name,
        created_by=r.created_by,
        created_at=r.created_at,
    )


class WorkspaceResourceRepository:
    """Workspace allow-list store. All access is scoped by workspace_id."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_by_workspace(self, workspace_id: str) -> list[WorkspaceResourceResult]:
        result = await self.db.execute(
            select(WorkspaceResource)
            .where(WorkspaceResource.workspace_id == workspace_id)
            .order_by(WorkspaceResource.created_at, WorkspaceResource.id)
        )
        return [_to_result(r) for r in result.scalars().all()]

    async def create(
        self, workspace_id: str, data: WorkspaceResourceCreate
    ) -> WorkspaceResourceResult:
        """Link a resource. Raises DuplicateResourceException if already linked."""
        resource_type = ResourceType(data.resource_type).value
        existing = await self.db.execute(
            select(WorkspaceResource.id).where(
                WorkspaceResource.workspace_id == workspace_id,
                WorkspaceResource.resource_type == resource_type,
                WorkspaceResource.resource_id == data.resource_id,
            )
        )
        if existing.scalar_one_or_none() is not None:
            raise DuplicateResourceException(workspace_id, resource_type, data.resource_id)

        row = WorkspaceResource(
            workspace_id=workspace_id,
            resource_type=resource_type,
            resource_id=data.resource_id,
            resource_url=data.resource_url,
            name=data.name,
            created_by=data.created_by,
        )
        try:
            self.db.add(row)
            await self.db.flush()
            await self.db.refresh(row)
        except IntegrityError:
            raise DuplicateResourceException(
                workspace_id, resource_type, data.resource_id
            ) from None
        return _to_result(row)

    async def delete(self, workspace_id: str, resource_row_id: str) -> None:
        """Unlink a resource. Raises ResourceNotFoundException if absent."""
        result = await self.db.execute(
            select(WorkspaceResource).where(
                WorkspaceResource.id == resource_row_id,
                WorkspaceResource.workspace_id == workspace_id,
            )
        )
        row = result.scalar_one_or_none()
        if row is None:
            raise ResourceNotFoundException("workspace_resource", resource_row_id)
        await self.db.delete(row)
        await self.db.flush()
