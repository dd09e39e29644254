"""SQLAlchemy table definitions for Masacarri.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
)
from sqlalchemy.dialects.postgresql import INET, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PAGES TABLE
# ============================================================================
pages_table = Table(
    "pages",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("title", String, nullable=False),
    Column("page_url", String, nullable=False),
    Column("published", Boolean, nullable=False, server_default="false"),
)

# ============================================================================
# COMMENTS TABLE (parent-pointer tree through reply_to)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("page_id", UUID, ForeignKey("pages.id", ondelete="CASCADE"), nullable=False),
    Column(
        "reply_to", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("ip_addr", INET, nullable=False),
    Column("display_name", String, nullable=False),
    Column("site_url", String, nullable=True),
    Column("mail_addr", String, nullable=True),
    Column("content", String, nullable=False),
    Column("delete_key", String, nullable=False),  # bcrypt hash or "-"
    Column("flags", Integer, nullable=False, server_default="0"),
    Column(
        "created_time",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

Index("idx_comments_page_id", comments_table.c.page_id)
Index("idx_comments_reply_to", comments_table.c.reply_to)
Index("idx_comments_created_time", comments_table.c.created_time)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(64), nullable=False, unique=True),
    Column("password_hash", String, nullable=False),
    Column("flags", Integer, nullable=False, server_default="0"),
)
