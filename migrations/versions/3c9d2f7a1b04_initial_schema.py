"""initial_schema

Create the schema for Circle:
- Users (unique username, positive age)
- User hobbies (set of tags per user)
- Friendships (one row per direction, no self-links)

Revision ID: 3c9d2f7a1b04
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c9d2f7a1b04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.CheckConstraint("age >= 1", name="age_positive"),
    )

    # ========================================================================
    # USER_HOBBIES table
    # ========================================================================
    op.create_table(
        "user_hobbies",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("hobby", sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "hobby", name="pk_user_hobbies"),
    )
    op.create_index("idx_user_hobbies_user_id", "user_hobbies", ["user_id"])

    # ========================================================================
    # FRIENDSHIPS table (both directions stored)
    # ========================================================================
    op.create_table(
        "friendships",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("friend_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["friend_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "friend_id", name="pk_friendships"),
        sa.CheckConstraint("user_id <> friend_id", name="no_self_friendship"),
    )
    op.create_index("idx_friendships_user_id", "friendships", ["user_id"])
    op.create_index("idx_friendships_friend_id", "friendships", ["friend_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_friendships_friend_id", table_name="friendships")
    op.drop_index("idx_friendships_user_id", table_name="friendships")
    op.drop_table("friendships")
    op.drop_index("idx_user_hobbies_user_id", table_name="user_hobbies")
    op.drop_table("user_hobbies")
    op.drop_table("users")
