"""DB session and repository dependencies (composition root)."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from searchhub.infrastructure.persistence.database import get_db, get_db_transactional
from searchhub.infrastructure.persistence.repositories import WorkspaceResourceRepository


async def get_workspace_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WorkspaceResourceRepository:
    return WorkspaceResourceRepository(db)


async def get_workspace_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> WorkspaceResourceRepository:
    return WorkspaceResourceRepository(db)


async def get_optional_workspace_repo(
    workspace: Annotated[str | None, Query()] = None,
) -> AsyncGenerator[WorkspaceResourceRepository | None, None]:
    """Repository only when the request names a workspace.

    Plain searches never open a session, so they keep working when
    DATABASE_URL is empty.
    """
    if not workspace:
        yield None
        return
    async with asynccontextmanager(get_db)() as session:
        yield WorkspaceResourceRepository(session)
