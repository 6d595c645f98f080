"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from circle.domain.error import (
    InvalidInputError,
    NotFoundError,
    RelationshipConflictError,
)
from circle.domain.service import FriendshipService, UserService
from circle.domain.value import UserDraft, UserId, Username
from circle.persistence.repository.inmemory import InMemoryUserRepository


def _draft(username: str, age: int = 30, hobbies=None) -> UserDraft:
    return UserDraft(
        username=Username(username),
        age=age,
        hobbies=frozenset(hobbies) if hobbies is not None else None,
    )


class TestCreateUser:
    """Tests for UserService.create_user()."""

    @pytest.mark.asyncio
    async def test_create_user_assigns_id_and_timestamp(self):
        """Should store a new user with a fresh ID and no friends."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)

        # Act
        user = await service.create_user(_draft("alice", hobbies={"Reading"}))

        # Assert
        assert user.id is not None
        assert user.created_at is not None
        assert user.username == Username("alice")
        assert user.hobbies == frozenset({"Reading"})
        assert user.friend_ids == frozenset()
        assert await user_repo.find_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_create_user_without_hobbies_gets_empty_set(self):
        """Should normalize missing hobbies to an empty set."""
        # Arrange
        service = UserService(InMemoryUserRepository())

        # Act
        user = await service.create_user(_draft("bob"))

        # Assert
        assert user.hobbies == frozenset()

    @pytest.mark.asyncio
    async def test_create_user_rejects_duplicate_username(self):
        """Should raise conflict when the username is taken."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)
        await service.create_user(_draft("alice"))

        # Act & Assert
        with pytest.raises(RelationshipConflictError, match="Username already exists"):
            await service.create_user(_draft("alice", age=41))

        assert len(await user_repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_create_user_rejects_none(self):
        """Should raise invalid input for a missing draft."""
        service = UserService(InMemoryUserRepository())

        with pytest.raises(InvalidInputError):
            await service.create_user(None)  # type: ignore[arg-type]


class TestUpdateUser:
    """Tests for UserService.update_user()."""

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self):
        """Should replace username, age and hobbies."""
        # Arrange
        service = UserService(InMemoryUserRepository())
        user = await service.create_user(_draft("alice", hobbies={"Reading"}))

        # Act
        updated = await service.update_user(
            user.id, _draft("alicia", age=31, hobbies={"Chess"})
        )

        # Assert
        assert updated.id == user.id
        assert updated.username == Username("alicia")
        assert updated.age == 31
        assert updated.hobbies == frozenset({"Chess"})
        assert updated.created_at == user.created_at

    @pytest.mark.asyncio
    async def test_update_without_hobbies_clears_them(self):
        """Should treat missing hobbies as an empty set."""
        service = UserService(InMemoryUserRepository())
        user = await service.create_user(_draft("alice", hobbies={"Reading"}))

        updated = await service.update_user(user.id, _draft("alice"))

        assert updated.hobbies == frozenset()

    @pytest.mark.asyncio
    async def test_update_preserves_friendships(self):
        """Should never touch the friend set."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)
        friendships = FriendshipService(user_repo)
        alice = await service.create_user(_draft("alice"))
        bob = await service.create_user(_draft("bob"))
        await friendships.link_users(alice.id, bob.id)

        # Act
        updated = await service.update_user(alice.id, _draft("alice", age=50))

        # Assert
        assert updated.friend_ids == frozenset({bob.id})

    @pytest.mark.asyncio
    async def test_update_does_not_recheck_username_uniqueness(self):
        """Should allow renaming to a username another user already has."""
        # Arrange
        service = UserService(InMemoryUserRepository())
        await service.create_user(_draft("alice"))
        bob = await service.create_user(_draft("bob"))

        # Act
        updated = await service.update_user(bob.id, _draft("alice"))

        # Assert
        assert updated.username == Username("alice")

    @pytest.mark.asyncio
    async def test_update_unknown_user_raises_not_found(self):
        """Should raise NotFoundError for an unknown ID."""
        service = UserService(InMemoryUserRepository())

        with pytest.raises(NotFoundError):
            await service.update_user(UserId(uuid4()), _draft("ghost"))

    @pytest.mark.asyncio
    async def test_update_rejects_missing_patch(self):
        """Should raise invalid input when the patch is None."""
        service = UserService(InMemoryUserRepository())
        user = await service.create_user(_draft("alice"))

        with pytest.raises(InvalidInputError, match="Updated user data"):
            await service.update_user(user.id, None)  # type: ignore[arg-type]


class TestDeleteUser:
    """Tests for UserService.delete_user()."""

    @pytest.mark.asyncio
    async def test_delete_friendless_user(self):
        """Should remove the user from the listing."""
        # Arrange
        service = UserService(InMemoryUserRepository())
        alice = await service.create_user(_draft("alice"))
        bob = await service.create_user(_draft("bob"))

        # Act
        await service.delete_user(alice.id)

        # Assert
        remaining = await service.list_users()
        assert [u.id for u in remaining] == [bob.id]

    @pytest.mark.asyncio
    async def test_delete_user_with_friends_is_rejected(self):
        """Should refuse to delete a user that still has friends."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)
        friendships = FriendshipService(user_repo)
        alice = await service.create_user(_draft("alice"))
        bob = await service.create_user(_draft("bob"))
        await friendships.link_users(alice.id, bob.id)

        # Act & Assert
        with pytest.raises(
            RelationshipConflictError,
            match="Unlink user from friends before deletion",
        ):
            await service.delete_user(alice.id)

        assert await user_repo.find_by_id(alice.id) is not None

    @pytest.mark.asyncio
    async def test_delete_after_unlink_succeeds(self):
        """Should allow deletion once every friendship is removed."""
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)
        friendships = FriendshipService(user_repo)
        alice = await service.create_user(_draft("alice"))
        bob = await service.create_user(_draft("bob"))
        await friendships.link_users(alice.id, bob.id)
        await friendships.unlink_users(alice.id, bob.id)

        await service.delete_user(alice.id)

        assert await user_repo.find_by_id(alice.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_user_raises_not_found(self):
        """Should raise NotFoundError for an unknown ID."""
        service = UserService(InMemoryUserRepository())

        with pytest.raises(NotFoundError):
            await service.delete_user(UserId(uuid4()))


class TestGetById:
    """Tests for UserService.get_by_id()."""

    @pytest.mark.asyncio
    async def test_get_existing_user(self):
        """Should return the stored user."""
        service = UserService(InMemoryUserRepository())
        user = await service.create_user(_draft("alice"))

        assert await service.get_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_get_unknown_user_raises_not_found(self):
        """Should raise NotFoundError naming the missing ID."""
        service = UserService(InMemoryUserRepository())
        missing = UserId(uuid4())

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_by_id(missing)

        assert exc_info.value.resource == "User"
        assert exc_info.value.identifier == str(missing)

    @pytest.mark.asyncio
    async def test_get_none_raises_invalid_input(self):
        """Should raise invalid input for a missing ID."""
        service = UserService(InMemoryUserRepository())

        with pytest.raises(InvalidInputError, match="User ID cannot be null"):
            await service.get_by_id(None)  # type: ignore[arg-type]


class TestListUsers:
    """Tests for UserService.list_users()."""

    @pytest.mark.asyncio
    async def test_list_empty(self):
        """Should return an empty list when no users exist."""
        service = UserService(InMemoryUserRepository())

        assert await service.list_users() == []

    @pytest.mark.asyncio
    async def test_list_returns_every_user(self):
        """Should return all users in storage order."""
        service = UserService(InMemoryUserRepository())
        alice = await service.create_user(_draft("alice"))
        bob = await service.create_user(_draft("bob"))

        users = await service.list_users()

        assert [u.id for u in users] == [alice.id, bob.id]
