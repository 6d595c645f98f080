"""SQLAlchemy table definitions for Circle.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    UniqueConstraint,
)
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
    Column("username", String(255), nullable=False),
    Column("age", Integer, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("username", name="uq_users_username"),
    CheckConstraint("age >= 1", name="age_positive"),
)

# ============================================================================
# USER_HOBBIES TABLE (element collection of hobby tags)
# ============================================================================
user_hobbies_table = Table(
    "user_hobbies",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("hobby", String(255), nullable=False),
    PrimaryKeyConstraint("user_id", "hobby", name="pk_user_hobbies"),
)

Index("idx_user_hobbies_user_id", user_hobbies_table.c.user_id)

# ============================================================================
# FRIENDSHIPS TABLE
# ============================================================================
# One row per direction: a friendship between A and B is stored as (A, B)
# and (B, A). Both rows are written in the same transaction.
friendships_table = Table(
    "friendships",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "friend_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    PrimaryKeyConstraint("user_id", "friend_id", name="pk_friendships"),
    CheckConstraint("user_id <> friend_id", name="no_self_friendship"),
)

Index("idx_friendships_user_id", friendships_table.c.user_id)
Index("idx_friendships_friend_id", friendships_table.c.friend_id)
