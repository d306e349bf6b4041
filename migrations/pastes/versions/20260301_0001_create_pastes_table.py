"""Create pastes table.

Revision ID: 0001
Revises: None
Create Date: 2026-03-01
"""

from typing import Sequence

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "pastes",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("slug", sa.String(length=20), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "language",
            sa.String(length=50),
            nullable=False,
            server_default="plaintext",
        ),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_pastes_slug", "pastes", ["slug"], unique=True)
    op.create_index("ix_pastes_created_at", "pastes", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_pastes_created_at", table_name="pastes")
    op.drop_index("ix_pastes_slug", table_name="pastes")
    op.drop_table("pastes")
