"""Persistence models: ORM entities."""

from searchhub.infrastructure.persistence.models.workspace_resource import WorkspaceResource

__all__ = ["WorkspaceResource"]
