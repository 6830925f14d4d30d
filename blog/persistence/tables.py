"""SQLAlchemy table definitions for the blog.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (User directory)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(50), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("avatar", Text, nullable=True),
    # Set for accounts created through registration
    Column("password_hash", Text, nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("created_at", TIMESTAMP, nullable=False, server_default=text("NOW()")),
    CheckConstraint("role IN ('user', 'admin')", name="check_user_role"),
)

Index("idx_users_created_at", users_table.c.created_at.desc())

# ============================================================================
# POSTS TABLE (Entity store, likes and comments embedded)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    # Insertion sequence, orders posts created at the same instant
    Column("seq", BigInteger, Identity(), nullable=False, unique=True),
    Column("title", String(100), nullable=False),
    Column("content", Text, nullable=False),
    # Weak reference into the user directory, no foreign key
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("image", Text, nullable=True),
    Column("is_published", Boolean, nullable=False, server_default="true"),
    Column("likes", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    # [{id, user_id, content, created_at}], oldest first
    Column("comments", JSONB, nullable=False, server_default="[]"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("created_at", TIMESTAMP, nullable=False, server_default=text("NOW()")),
    Column("updated_at", TIMESTAMP, nullable=False, server_default=text("NOW()")),
    CheckConstraint("view_count >= 0", name="check_view_count_non_negative"),
    CheckConstraint("char_length(title) BETWEEN 1 AND 100", name="check_title_length"),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 5000", name="check_content_length"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc(), posts_table.c.seq)
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_tags", posts_table.c.tags, postgresql_using="gin")
