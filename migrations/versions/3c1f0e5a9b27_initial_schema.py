"""initial_schema

Create the schema for Masacarri:
- Pages (articles that accept comments)
- Comments (parent-pointer threads through reply_to)
- Users (administrator accounts)

Revision ID: 3c1f0e5a9b27
Revises:
Create Date: 2026-10-19 10:12:41.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0e5a9b27"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # PAGES table
    # ========================================================================
    op.create_table(
        "pages",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("page_url", sa.String(), nullable=False),
        sa.Column(
            "published", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # COMMENTS table (reply_to points at the parent comment)
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("page_id", sa.UUID(), nullable=False),
        sa.Column("reply_to", sa.UUID(), nullable=True),
        sa.Column("ip_addr", postgresql.INET(), nullable=False),
        sa.Column("display_name", sa.String(), nullable=False),
        sa.Column("site_url", sa.String(), nullable=True),
        sa.Column("mail_addr", sa.String(), nullable=True),
        sa.Column("content", sa.String(), nullable=False),
        sa.Column("delete_key", sa.String(), nullable=False),
        sa.Column("flags", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column(
            "created_time",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["page_id"], ["pages.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["reply_to"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_page_id", "comments", ["page_id"])
    op.create_index("idx_comments_reply_to", "comments", ["reply_to"])
    op.create_index("idx_comments_created_time", "comments", ["created_time"])

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(length=64), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("flags", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("users")
    op.drop_index("idx_comments_created_time", table_name="comments")
    op.drop_index("idx_comments_reply_to", table_name="comments")
    op.drop_index("idx_comments_page_id", table_name="comments")
    op.drop_table("comments")
    op.drop_table("pages")
