"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from searchhub.api.v1.dependencies.
"""

from fastapi import APIRouter

from searchhub.api.v1.endpoints import health, search, teams, workspace_resources

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(
    workspace_resources.router, prefix="/workspaces", tags=["workspace-resources"]
)
api_router.include_router(teams.router, prefix="/teams", tags=["teams"])
