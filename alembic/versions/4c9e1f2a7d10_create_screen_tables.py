"""create screens, screen_sessions and artworks tables

Revision ID: 4c9e1f2a7d10
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4c9e1f2a7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the screen registry, one-row-per-screen sessions and artworks."""
    op.create_table(
        "screens",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("registered_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("wallet_address", sa.String(length=128), nullable=True),
        sa.Column("push_notification_token", sa.String(length=256), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "screen_sessions",
        sa.Column("screen_id", sa.String(length=36), nullable=False),
        sa.Column("session_secret", sa.String(length=128), nullable=False),
        sa.Column("valid_from", sa.DateTime(timezone=True), nullable=False),
        sa.Column("valid_to", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["screen_id"],
            ["screens.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("screen_id"),
    )
    op.create_table(
        "artworks",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("screen_id", sa.String(length=36), nullable=False),
        sa.Column("created_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("object_key", sa.String(length=512), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=True),
        sa.Column("artist", sa.String(length=256), nullable=True),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column("currency", sa.String(length=16), nullable=True),
        sa.Column("link", sa.String(length=1024), nullable=True),
        sa.Column("short_text", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["screen_id"],
            ["screens.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_artworks_screen_id", "artworks", ["screen_id"])


def downgrade() -> None:
    """Drop all screen tables."""
    op.drop_index("ix_artworks_screen_id", table_name="artworks")
    op.drop_table("artworks")
    op.drop_table("screen_sessions")
    op.drop_table("screens")
