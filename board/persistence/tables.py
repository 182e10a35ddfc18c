"""SQLAlchemy table definitions for the board.

A post is stored as one row: identity, author and timestamps as columns,
and the rest of the aggregate (title, content, tags, likes, comments with
their replies) as a JSONB document. ``version`` backs compare-and-swap saves.
"""

from sqlalchemy import (
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column("created_at", TIMESTAMP, nullable=False, server_default=text("NOW()")),
    Column("updated_at", TIMESTAMP, nullable=False, server_default=text("NOW()")),
    Column("last_login_at", TIMESTAMP, nullable=True),
)

# ============================================================================
# POSTS TABLE (whole aggregate per row)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("author_id", UUID, nullable=False),
    Column("document", JSONB, nullable=False),
    Column("version", Integer, nullable=False, server_default="1"),
    Column("created_at", TIMESTAMP, nullable=False, server_default=text("NOW()")),
    Column("updated_at", TIMESTAMP, nullable=False, server_default=text("NOW()")),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
