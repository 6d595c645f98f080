"""Unit tests for GetGraphUseCase."""

import pytest

from circle.application.usecase.graph import GetGraphUseCase
from circle.domain.repository import UserRepository
from circle.domain.service import FriendshipService
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetGraphUseCase:
    """Tests for GetGraphUseCase."""

    @pytest.mark.asyncio
    async def test_graph_response(self, unit_env):
        """Should return scored nodes and both directions of each edge."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        friendships = await unit_env.get(FriendshipService)
        use_case = await unit_env.get(GetGraphUseCase)
        alice = await user_repo.save(make_user("alice", hobbies={"Reading"}))
        bob = await user_repo.save(make_user("bob", hobbies={"Reading", "Gaming"}))
        await friendships.link_users(alice.id, bob.id)

        # Act
        response = await use_case.execute()
        data = response.model_dump(by_alias=True)

        # Assert
        assert {node["username"] for node in data["nodes"]} == {"alice", "bob"}
        assert all(node["popularityScore"] == 1.5 for node in data["nodes"])
        assert sorted((e["source"], e["target"]) for e in data["edges"]) == sorted(
            [(str(alice.id), str(bob.id)), (str(bob.id), str(alice.id))]
        )
