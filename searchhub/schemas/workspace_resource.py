"""Workspace resource allow-list API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from searchhub.domain.enums import ResourceType


class WorkspaceResourceCreateRequest(BaseModel):
    """Body for POST /workspaces/{workspace_id}/resources."""

    model_config = ConfigDict(populate_by_name=True)

    resource_type: ResourceType = Field(..., alias="resourceType")
    resource_id: str = Field(..., alias="resourceId", min_length=1, max_length=500)
    resource_url: str | None = Field(default=None, alias="resourceUrl", max_length=2048)
    name: str | None = Field(default=None, max_length=255)

    @field_validator("resource_id")
    @classmethod
    def resource_id_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("resourceId must not be blank")
        return v


class WorkspaceResourceResponse(BaseModel):
    """Linked resource (read-model)."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    workspace_id: str = Field(..., alias="workspaceId")
    resource_type: ResourceType = Field(..., alias="resourceType")
    resource_id: str = Field(..., alias="resourceId")
    resource_url: str | None = Field(default=None, alias="resourceUrl")
    name: str | None = None
    created_by: str | None = Field(default=None, alias="createdBy")
    created_at: datetime | None = Field(default=None, alias="createdAt")


class WorkspaceResourceListResponse(BaseModel):
    resources: list[WorkspaceResourceResponse]
