"""Friendship domain service."""

import logfire

from circle.domain.error import (
    InvalidInputError,
    NotFoundError,
    RelationshipConflictError,
)
from circle.domain.model import User
from circle.domain.repository import UserRepository
from circle.domain.value import UserId

from .base import Service


class FriendshipService(Service):
    """Domain service for linking and unlinking users.

    Each user owns its own friend set, so every change writes both users.
    Both rows are locked first and both saves share the caller's unit of
    work, which keeps the relation symmetric under concurrent requests.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize friendship service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def link_users(self, user_id: UserId, friend_id: UserId) -> None:
        """Make two users friends.

        Args:
            user_id: First user
            friend_id: Second user

        Raises:
            InvalidInputError: If either ID is None
            RelationshipConflictError: If linking a user to itself, or the
                users are already friends
            NotFoundError: If either user does not exist
        """
        _require_ids(user_id, friend_id)

        with logfire.span(
            "friendship_service.link_users",
            user_id=str(user_id),
            friend_id=str(friend_id),
        ):
            if user_id == friend_id:
                logfire.warn("Attempted to link user to self", user_id=str(user_id))
                raise RelationshipConflictError("Cannot link user to self")

            user, friend = await self._load_pair(user_id, friend_id)

            if user.is_friend_of(friend.id):
                logfire.warn(
                    "Users are already friends",
                    user_id=str(user_id),
                    friend_id=str(friend_id),
                )
                raise RelationshipConflictError("Users are already friends")

            await self.user_repository.save(user.with_friend(friend.id))
            await self.user_repository.save(friend.with_friend(user.id))
            logfire.info(
                "Users linked", user_id=str(user_id), friend_id=str(friend_id)
            )

    async def unlink_users(self, user_id: UserId, friend_id: UserId) -> None:
        """Remove the friendship between two users.

        Args:
            user_id: First user
            friend_id: Second user

        Raises:
            InvalidInputError: If either ID is None
            NotFoundError: If either user does not exist
            RelationshipConflictError: If the users are not friends
        """
        _require_ids(user_id, friend_id)

        with logfire.span(
            "friendship_service.unlink_users",
            user_id=str(user_id),
            friend_id=str(friend_id),
        ):
            user, friend = await self._load_pair(user_id, friend_id)

            if not user.is_friend_of(friend.id):
                logfire.warn(
                    "Users are not friends",
                    user_id=str(user_id),
                    friend_id=str(friend_id),
                )
                raise RelationshipConflictError("Users are not friends")

            await self.user_repository.save(user.without_friend(friend.id))
            await self.user_repository.save(friend.without_friend(user.id))
            logfire.info(
                "Users unlinked", user_id=str(user_id), friend_id=str(friend_id)
            )

    async def _load_pair(
        self, user_id: UserId, friend_id: UserId
    ) -> tuple[User, User]:
        """Lock and load both sides of a friendship."""
        await self.user_repository.lock_for_update([user_id, friend_id])

        user = await self.user_repository.find_by_id(user_id)
        if not user:
            logfire.warn("User not found", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))

        friend = await self.user_repository.find_by_id(friend_id)
        if not friend:
            logfire.warn("Friend not found", friend_id=str(friend_id))
            raise NotFoundError("Friend", str(friend_id))

        return user, friend


def _require_ids(user_id: UserId, friend_id: UserId) -> None:
    if user_id is None:
        raise InvalidInputError("User ID cannot be null")
    if friend_id is None:
        raise InvalidInputError("Friend ID cannot be null")
