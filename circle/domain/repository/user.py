"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from circle.domain.model.user import User
from circle.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations, including the
    user's hobby tags and outgoing friendship edges.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (batch query).

        Unknown ids are skipped silently.

        Args:
            user_ids: Identifiers to look up

        Returns:
            The users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_username(self, username: Username) -> bool:
        """Check whether a username is already taken.

        Args:
            username: Username to check

        Returns:
            True if some user has this username
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Find all users, in storage order.

        Returns:
            Every stored user
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Persists the user row, its hobbies and its outgoing friendship
        edges. Callers that change a friendship must save both users.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user.

        Args:
            user_id: The user ID to delete
        """
        pass

    @abstractmethod
    async def lock_for_update(self, user_ids: Sequence[UserId]) -> None:
        """Lock user rows until the current unit of work ends.

        Used to serialize concurrent link/unlink/delete calls touching the
        same users. Implementations must acquire locks in a stable order.

        Args:
            user_ids: Users to lock
        """
        pass
