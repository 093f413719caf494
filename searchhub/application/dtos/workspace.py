"""DTOs for workspace resource allow-lists (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from searchhub.domain.enums import ResourceType


@dataclass(frozen=True)
class WorkspaceResourceResult:
    """Link between a workspace and one Microsoft 365 resource (read-model)."""

    id: str
    workspace_id: str
    resource_type: ResourceType
    resource_id: str
    resource_url: str | None = None
    name: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class WorkspaceResourceCreate:
    """Input for linking a resource to a workspace."""

    resource_type: ResourceType
    resource_id: str
    resource_url: str | None = None
    name: str | None = None
    created_by: str | None = None
