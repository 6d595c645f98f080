"""Unit tests for UpdateUserUseCase and DeleteUserUseCase."""

from uuid import uuid4

import pytest

from circle.application.usecase.user import DeleteUserUseCase, UpdateUserUseCase
from circle.application.usecase.user.delete_user import DeleteUserRequest
from circle.application.usecase.user.update_user import UpdateUserRequest
from circle.domain.error import NotFoundError, RelationshipConflictError
from circle.domain.repository import UserRepository
from circle.domain.service import FriendshipService
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase."""

    @pytest.mark.asyncio
    async def test_update_user(self, unit_env):
        """Should replace the editable fields and recompute the score."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        friendships = await unit_env.get(FriendshipService)
        use_case = await unit_env.get(UpdateUserUseCase)

        alice = await user_repo.save(make_user("alice", hobbies={"Reading"}))
        bob = await user_repo.save(make_user("bob", hobbies={"Chess"}))
        await friendships.link_users(alice.id, bob.id)

        # Act
        response = await use_case.execute(
            UpdateUserRequest(
                user_id=alice.id, username="alice", age=44, hobbies={"Chess"}
            )
        )

        # Assert
        assert response.age == 44
        assert response.hobbies == ["Chess"]
        assert response.friend_ids == [str(bob.id)]
        assert response.popularity_score == 1.5

    @pytest.mark.asyncio
    async def test_update_unknown_user(self, unit_env):
        """Should propagate NotFoundError."""
        use_case = await unit_env.get(UpdateUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateUserRequest(user_id=uuid4(), username="ghost", age=30)
            )


class TestDeleteUserUseCase:
    """Tests for DeleteUserUseCase."""

    @pytest.mark.asyncio
    async def test_delete_user(self, unit_env):
        """Should delete a friendless user."""
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(DeleteUserUseCase)
        alice = await user_repo.save(make_user("alice"))

        response = await use_case.execute(DeleteUserRequest(user_id=alice.id))

        assert response.success is True
        assert response.message == "User deleted successfully"
        assert await user_repo.find_by_id(alice.id) is None

    @pytest.mark.asyncio
    async def test_delete_user_with_friends(self, unit_env):
        """Should refuse while friendships remain."""
        user_repo = await unit_env.get(UserRepository)
        friendships = await unit_env.get(FriendshipService)
        use_case = await unit_env.get(DeleteUserUseCase)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        await friendships.link_users(alice.id, bob.id)

        with pytest.raises(RelationshipConflictError):
            await use_case.execute(DeleteUserRequest(user_id=bob.id))
