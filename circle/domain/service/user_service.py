"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from circle.domain.error import (
    InvalidInputError,
    NotFoundError,
    RelationshipConflictError,
)
from circle.domain.model import User
from circle.domain.repository import UserRepository
from circle.domain.value import UserDraft, UserId

from .base import Service


class UserService(Service):
    """Domain service for the user lifecycle.

    Owns the create/update/delete preconditions. Friendship edges are never
    changed here; see FriendshipService.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            InvalidInputError: If user_id is None
            NotFoundError: If user not found
        """
        if user_id is None:
            raise InvalidInputError("User ID cannot be null")

        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.debug(
                "User found", user_id=str(user_id), username=user.username.root
            )
            return user

    async def list_users(self) -> list[User]:
        """List every stored user.

        Returns:
            All users, in storage order
        """
        with logfire.span("user_service.list_users"):
            users = await self.user_repository.find_all()
            logfire.info("Fetched users", count=len(users))
            return users

    async def create_user(self, draft: UserDraft) -> User:
        """Create a user from a draft.

        A fresh ID and creation timestamp are always assigned.

        Args:
            draft: Username, age and optional hobbies

        Returns:
            The stored user

        Raises:
            InvalidInputError: If draft is None
            RelationshipConflictError: If the username is already taken
        """
        if draft is None:
            raise InvalidInputError("User cannot be null")

        with logfire.span("user_service.create_user", username=draft.username.root):
            if await self.user_repository.exists_by_username(draft.username):
                logfire.warn(
                    "Duplicate username on create", username=draft.username.root
                )
                raise RelationshipConflictError("Username already exists")

            user = User(
                id=UserId(uuid4()),
                username=draft.username,
                age=draft.age,
                hobbies=draft.hobbies or frozenset(),
                friend_ids=frozenset(),
                created_at=datetime.now(),
            )
            saved = await self.user_repository.save(user)
            logfire.info(
                "User created", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def update_user(self, user_id: UserId, patch: UserDraft) -> User:
        """Replace a user's username, age and hobbies.

        Friendships and creation time are left untouched. The username is
        not checked against other users here, unlike create_user.

        Args:
            user_id: User to update
            patch: New username, age and optional hobbies

        Returns:
            The updated user

        Raises:
            InvalidInputError: If user_id or patch is None
            NotFoundError: If user not found
        """
        if user_id is None:
            raise InvalidInputError("User ID cannot be null")
        if patch is None:
            raise InvalidInputError("Updated user data cannot be null")

        with logfire.span("user_service.update_user", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            updated = user.model_copy(
                update={
                    "username": patch.username,
                    "age": patch.age,
                    "hobbies": patch.hobbies or frozenset(),
                }
            )
            saved = await self.user_repository.save(updated)
            logfire.info("User updated", user_id=str(saved.id))
            return saved

    async def delete_user(self, user_id: UserId) -> None:
        """Delete a user that has no friends left.

        Args:
            user_id: User to delete

        Raises:
            InvalidInputError: If user_id is None
            NotFoundError: If user not found
            RelationshipConflictError: If the user still has friends
        """
        if user_id is None:
            raise InvalidInputError("User ID cannot be null")

        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            # Hold the row so a concurrent link cannot slip in after the check
            await self.user_repository.lock_for_update([user_id])
            user = await self.get_by_id(user_id)

            if user.friend_ids:
                logfire.warn(
                    "Delete refused, user still has friends",
                    user_id=str(user_id),
                    friend_count=len(user.friend_ids),
                )
                raise RelationshipConflictError(
                    "Unlink user from friends before deletion"
                )

            await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=str(user_id))
