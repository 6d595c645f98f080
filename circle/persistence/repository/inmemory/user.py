"""In-memory user repository for testing."""

from typing import Optional, Sequence

from circle.domain.model.user import User
from circle.domain.repository.user import UserRepository
from circle.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [
            self._users[uid] for uid in dict.fromkeys(user_ids) if uid in self._users
        ]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def exists_by_username(self, username: Username) -> bool:
        """Check whether a username is already taken."""
        return await self.find_by_username(username) is not None

    async def find_all(self) -> list[User]:
        """Find all users, in insertion order."""
        return list(self._users.values())

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user by ID."""
        self._users.pop(user_id, None)

    async def lock_for_update(self, user_ids: Sequence[UserId]) -> None:
        """No-op: nothing here awaits real I/O, so writes never interleave."""
        return None
