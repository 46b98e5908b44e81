"""SQLAlchemy table definitions for Sportalk.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    Boolean,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("nickname", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column(
        "role",
        postgresql.ENUM(
            "USER", "INFLUENCER", "ADMIN", name="user_role", create_type=False
        ),
        nullable=False,
        server_default="USER",
    ),
    Column("profile_image_url", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column(
        "favorite_sports",
        postgresql.ARRAY(String(50)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "favorite_teams",
        postgresql.ARRAY(String(100)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("content", Text, nullable=False),
    Column(
        "type",
        postgresql.ENUM(
            "ANALYSIS", "CHEERING", "HIGHLIGHT", name="post_type", create_type=False
        ),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("char_length(content) BETWEEN 1 AND 10000", name="content_length"),
    CheckConstraint("view_count >= 0", name="view_count_non_negative"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_deleted_at", posts_table.c.deleted_at)

# ============================================================================
# POST VERSIONS TABLE (append-only edit history)
# ============================================================================
post_versions_table = Table(
    "post_versions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("version", Integer, nullable=False),
    Column("content", Text, nullable=False),
    Column("edit_reason", String(500), nullable=True),
    Column("character_diff", Integer, nullable=False, server_default="0"),
    Column("is_major_change", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "version", name="uq_post_version"),
    CheckConstraint("version >= 1", name="version_positive"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "parent_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("char_length(content) BETWEEN 1 AND 2000", name="content_length"),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)

# ============================================================================
# MEDIA TABLE
# ============================================================================
media_table = Table(
    "media",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "type",
        postgresql.ENUM("image", "video", name="media_type", create_type=False),
        nullable=False,
    ),
    Column("url", Text, nullable=False, server_default=""),
    Column(
        "status",
        postgresql.ENUM(
            "UPLOADING", "COMPLETED", "FAILED", name="media_status", create_type=False
        ),
        nullable=False,
        server_default="UPLOADING",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_media_post_id", media_table.c.post_id)

# ============================================================================
# FOLLOWS TABLE
# ============================================================================
follows_table = Table(
    "follows",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "follower_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "following_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("follower_id", "following_id", name="uq_follow_pair"),
    CheckConstraint("follower_id <> following_id", name="no_self_follow"),
)

Index("idx_follows_following_id", follows_table.c.following_id)
