"""Create projects, clusters and delivery_targets tables

Revision ID: 3f2a9c1d7e40
Revises:
Create Date: 2026-10-18 10:12:31.402117

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e40"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("name", sa.String(length=64), nullable=False, comment="名称"),
        sa.Column("alias", sa.String(length=255), nullable=False, comment="显示名称"),
        sa.Column("description", sa.Text(), nullable=False, comment="描述"),
        sa.Column("namespace", sa.String(length=255), nullable=False, comment="命名空间"),
        sa.Column("create_time", sa.DateTime(), nullable=False, comment="创建时间"),
        sa.Column("update_time", sa.DateTime(), nullable=False, comment="更新时间"),
        sa.PrimaryKeyConstraint("name"),
    )
    op.create_index("idx_projects_create_time", "projects", ["create_time"], unique=False)

    op.create_table(
        "clusters",
        sa.Column("name", sa.String(length=64), nullable=False, comment="名称"),
        sa.Column("alias", sa.String(length=255), nullable=False, comment="显示名称"),
        sa.Column("description", sa.Text(), nullable=False, comment="描述"),
        sa.Column("create_time", sa.DateTime(), nullable=False, comment="创建时间"),
        sa.Column("update_time", sa.DateTime(), nullable=False, comment="更新时间"),
        sa.PrimaryKeyConstraint("name"),
    )

    op.create_table(
        "delivery_targets",
        sa.Column("name", sa.String(length=64), nullable=False, comment="名称"),
        sa.Column("alias", sa.String(length=255), nullable=False, comment="显示名称"),
        sa.Column("description", sa.Text(), nullable=False, comment="描述"),
        sa.Column("project", sa.String(length=64), nullable=False, comment="所属 Project"),
        sa.Column(
            "namespace",
            sa.String(length=255),
            nullable=False,
            comment="所属 Project 的命名空间",
        ),
        sa.Column("cluster", sa.JSON(), nullable=True, comment="集群引用"),
        sa.Column("variable", sa.JSON(), nullable=True, comment="变量"),
        sa.Column("create_time", sa.DateTime(), nullable=False, comment="创建时间"),
        sa.Column("update_time", sa.DateTime(), nullable=False, comment="更新时间"),
        sa.PrimaryKeyConstraint("name"),
    )
    op.create_index("idx_delivery_targets_project", "delivery_targets", ["project"], unique=False)
    op.create_index(
        "idx_delivery_targets_namespace", "delivery_targets", ["namespace"], unique=False
    )
    op.create_index(
        "idx_delivery_targets_create_time", "delivery_targets", ["create_time"], unique=False
    )


def downgrade() -> None:
    op.drop_index("idx_delivery_targets_create_time", table_name="delivery_targets")
    op.drop_index("idx_delivery_targets_namespace", table_name="delivery_targets")
    op.drop_index("idx_delivery_targets_project", table_name="delivery_targets")
    op.drop_table("delivery_targets")
    op.drop_table("clusters")
    op.drop_index("idx_projects_create_time", table_name="projects")
    op.drop_table("projects")
