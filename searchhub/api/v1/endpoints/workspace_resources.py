"""Workspace resource allow-list API (SharePoint sites, Teams, Planner plans)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status

from searchhub.api.v1.dependencies import get_workspace_repo, get_workspace_repo_for_write
from searchhub.application.dtos.workspace import WorkspaceResourceCreate, WorkspaceResourceResult
from searchhub.application.interfaces.repositories import IWorkspaceResourceRepository
from searchhub.core.limiter import limit_writes
from searchhub.schemas.workspace_resource import (
    WorkspaceResourceCreateRequest,
    WorkspaceResourceListResponse,
    WorkspaceResourceResponse,
)
from searchhub.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

WorkspaceId = Annotated[str, Path(min_length=1, max_length=255)]


def _to_response(r: WorkspaceResourceResult) -> WorkspaceResourceResponse:
    return WorkspaceResourceResponse(
        id=r.id,
        workspace_id=r.workspace_id,
        resource_type=r.resource_type,
        resource_id=r.resource_id,
        resource_url=r.resource_url,
        name=r.name,
        created_by=r.created_by,
        created_at=r.created_at,
    )


@router.get("/{workspace_id}/resources", response_model=WorkspaceResourceListResponse)
async def list_workspace_resources(
    workspace_id: WorkspaceId,
    repo: Annotated[IWorkspaceResourceRepository, Depends(get_workspace_repo)],
):
    """List the resources linked to a workspace (oldest first)."""
    resources = await repo.list_by_workspace(workspace_id)
    return WorkspaceResourceListResponse(resources=[_to_response(r) for r in resources])


@router.post(
    "/{workspace_id}/resources",
    response_model=WorkspaceResourceResponse,
    status_code=status.HTTP_201_CREATED,
)
@limit_writes
async def add_workspace_resource(
    request: Request,
    workspace_id: WorkspaceId,
    body: WorkspaceResourceCreateRequest,
    repo: Annotated[IWorkspaceResourceRepository, Depends(get_workspace_repo_for_write)],
    user_id: str | None = Query(None, alias="userId", description="Recorded as created_by"),
):
    """Link a resource to a workspace. 409 if it is already linked."""
    created = await repo.create(
        workspace_id,
        WorkspaceResourceCreate(
            resource_type=body.resource_type,
            resource_id=body.resource_id,
            resource_url=body.resource_url,
            name=body.name,
            created_by=user_id,
        ),
    )
    logger.info(
        "Linked %s %s to workspace %s", created.resource_type.value, created.resource_id, workspace_id
    )
    return _to_response(created)


@router.delete(
    "/{workspace_id}/resources/{resource_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
@limit_writes
async def remove_workspace_resource(
    request: Request,
    workspace_id: WorkspaceId,
    resource_id: Annotated[str, Path(min_length=1)],
    repo: Annotated[IWorkspaceResourceRepository, Depends(get_workspace_repo_for_write)],
):
    """Unlink a resource by its link id. 404 if unknown in this workspace."""
    await repo.delete(workspace_id, resource_id)
    logger.info("Unlinked resource %s from workspace %s", resource_id, workspace_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
