"""Add users table for JWT auth and the ordered cabinet association.

Revision ID: 20261002000000
Revises: 20261001000000
Create Date: 2026-10-02

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261002000000"
down_revision: Union[str, None] = "20261001000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("last_name", sa.String(length=255), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id"),
    )
    # Unique index is the real guard against concurrent duplicate registrations.
    op.create_index(
        op.f("ix_users_username"),
        "users",
        ["username"],
        unique=True,
    )

    op.create_table(
        "cabinet_entries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("strain_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["strain_id"], ["strains.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_cabinet_entries_user_id"), "cabinet_entries", ["user_id"], unique=False
    )
    op.create_index(
        op.f("ix_cabinet_entries_strain_id"), "cabinet_entries", ["strain_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_cabinet_entries_strain_id"), table_name="cabinet_entries")
    op.drop_index(op.f("ix_cabinet_entries_user_id"), table_name="cabinet_entries")
    op.drop_table("cabinet_entries")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
