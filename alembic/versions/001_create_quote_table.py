"""Initial schema - quote table.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "quote",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author", sa.Text(), nullable=False),
        # JSON-encoded ordered array of tag strings
        sa.Column("tags", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("source", sa.Text(), nullable=False),
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
        sa.CheckConstraint("likes >= 0", name="ck_quote_likes_non_negative"),
    )
    op.create_index(
        "ix_quote_likes_created_at",
        "quote",
        [sa.text("likes DESC"), sa.text("created_at DESC")],
    )


def downgrade() -> None:
    op.drop_index("ix_quote_likes_created_at", table_name="quote")
    op.drop_table("quote")
