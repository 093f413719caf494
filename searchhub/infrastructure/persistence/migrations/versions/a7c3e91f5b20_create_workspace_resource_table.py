"""create workspace_resource table

Revision ID: a7c3e91f5b20
Revises:
Create Date: 2026-10-16

Allow-list of SharePoint sites, Teams and Planner plans linked to a workspace.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "a7c3e91f5b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "workspace_resource",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("workspace_id", sa.String(), nullable=False),
        sa.Column("resource_type", sa.String(length=32), nullable=False),
        sa.Column("resource_id", sa.String(length=500), nullable=False),
        sa.Column("resource_url", sa.String(length=2048), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("created_by", sa.String(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "workspace_id",
            "resource_type",
            "resource_id",
            name="uq_workspace_resource_workspace_type_resource",
        ),
        sa.CheckConstraint(
            "resource_type IN ('sharepoint', 'teams', 'planner')",
            name="ck_workspace_resource_type",
        ),
    )
    op.create_index(
        "ix_workspace_resource_workspace_id",
        "workspace_resource",
        ["workspace_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_workspace_resource_workspace_id", table_name="workspace_resource")
    op.drop_table("workspace_resource")
