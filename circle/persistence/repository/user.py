"""PostgreSQL implementation of User repository."""

from collections import defaultdict
from typing import Any, Optional, Sequence

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from circle.domain.model import User
from circle.domain.repository import UserRepository
from circle.domain.value import UserId, Username
from circle.persistence.mappers import (
    friendship_rows,
    hobby_rows,
    row_to_user,
    user_to_dict,
)
from circle.persistence.tables import (
    friendships_table,
    user_hobbies_table,
    users_table,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        users = await self._fetch_users(stmt)
        return users[0] if users else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (batch query)."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        return await self._fetch_users(stmt)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        users = await self._fetch_users(stmt)
        return users[0] if users else None

    async def exists_by_username(self, username: Username) -> bool:
        """Check whether a username is already taken."""
        stmt = (
            select(users_table.c.id)
            .where(users_table.c.username == username.root)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_all(self) -> list[User]:
        """Find all users, oldest first."""
        stmt = select(users_table).order_by(users_table.c.created_at)
        return await self._fetch_users(stmt)

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Writes the user row, then replaces its hobby rows and its outgoing
        friendship rows.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)

        exists = await self.session.execute(
            select(users_table.c.id).where(users_table.c.id == user.id)
        )
        if exists.first() is not None:
            # Update; created_at is fixed at creation
            user_dict.pop("created_at")
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)
        await self.session.execute(stmt)

        await self.session.execute(
            delete(user_hobbies_table).where(user_hobbies_table.c.user_id == user.id)
        )
        hobbies = hobby_rows(user)
        if hobbies:
            await self.session.execute(insert(user_hobbies_table), hobbies)

        await self.session.execute(
            delete(friendships_table).where(friendships_table.c.user_id == user.id)
        )
        friendships = friendship_rows(user)
        if friendships:
            await self.session.execute(insert(friendships_table), friendships)

        await self.session.flush()
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user (hobby rows cascade)."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def lock_for_update(self, user_ids: Sequence[UserId]) -> None:
        """Lock user rows with SELECT ... FOR UPDATE.

        Rows are locked in ID order so that two requests locking the same
        pair in opposite order cannot deadlock. Locks are released when the
        request's transaction commits or rolls back.
        """
        if not user_ids:
            return

        stmt = (
            select(users_table.c.id)
            .where(users_table.c.id.in_(user_ids))
            .order_by(users_table.c.id)
            .with_for_update()
        )
        await self.session.execute(stmt)

    async def _fetch_users(self, stmt: Any) -> list[User]:
        """Run a users query and attach hobbies and friend IDs.

        Uses two extra batch queries regardless of the number of users
        (avoids N+1).
        """
        result = await self.session.execute(stmt)
        rows = [dict(row) for row in result.mappings().all()]
        if not rows:
            return []

        ids = [row["id"] for row in rows]

        hobbies: dict[Any, list[str]] = defaultdict(list)
        hobby_result = await self.session.execute(
            select(user_hobbies_table).where(user_hobbies_table.c.user_id.in_(ids))
        )
        for row in hobby_result.mappings().all():
            hobbies[row["user_id"]].append(row["hobby"])

        friends: dict[Any, list[Any]] = defaultdict(list)
        friend_result = await self.session.execute(
            select(friendships_table).where(friendships_table.c.user_id.in_(ids))
        )
        for row in friend_result.mappings().all():
            friends[row["user_id"]].append(row["friend_id"])

        return [
            row_to_user(row, hobbies=hobbies[row["id"]], friend_ids=friends[row["id"]])
            for row in rows
        ]
