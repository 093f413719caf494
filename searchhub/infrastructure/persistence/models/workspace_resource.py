"""Workspace resource ORM model. Allow-list entry linking a workspace to a site or plan."""

from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from searchhub.infrastructure.persistence.database import Base
from searchhub.shared.utils.generators import generate_cuid


class WorkspaceResource(Base):
    """Resource linked to a workspace. Table: workspace_resource."""

    __tablename__ = "workspace_resource"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    workspace_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    resource_type: Mapped[str] = mapped_column(String(32), nullable=False)
    resource_id: Mapped[str] = mapped_column(String(500), nullable=False)
    resource_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_by: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint(
            "workspace_id",
            "resource_type",
            "resource_id",
            name="uq_workspace_resource_workspace_type_resource",
        ),
    )
