"""Popularity scoring and graph export domain service."""

from dataclasses import dataclass
from typing import Iterable

import logfire

from circle.domain.error import InvalidInputError
from circle.domain.model import User
from circle.domain.repository import UserRepository
from circle.domain.value import UserId, Username

from .base import Service

# Points each friend contributes per hobby it shares with the user
SHARED_HOBBY_WEIGHT = 0.5


@dataclass
class GraphNode:
    """One user in the exported graph."""

    id: str
    username: Username
    age: int
    popularity_score: float


@dataclass
class GraphEdge:
    """One directed observation of a friendship (source lists target)."""

    source: str
    target: str


@dataclass
class GraphData:
    """Whole-graph export.

    Every friendship appears as two edges, one per direction.
    """

    nodes: list[GraphNode]
    edges: list[GraphEdge]


@dataclass
class UserView:
    """External projection of a user.

    Friends are referenced by ID only so that serializing a user never
    walks the graph.
    """

    id: UserId
    username: Username
    age: int
    hobbies: frozenset[str]
    popularity_score: float
    friend_ids: frozenset[UserId]


def popularity_score(user: User, friends: Iterable[User]) -> float:
    """Compute a user's popularity score from already-loaded friends.

    score = friend count + 0.5 * sum of |user.hobbies & friend.hobbies|

    The hobby term is a sum of pairwise overlaps, so a hobby shared with
    three friends counts three times.

    Args:
        user: Subject user
        friends: The user's friends (entries not in user.friend_ids are ignored)

    Returns:
        Popularity score, always >= 0
    """
    shared = sum(
        len(user.hobbies & friend.hobbies)
        for friend in friends
        if friend.id in user.friend_ids
    )
    return len(user.friend_ids) + SHARED_HOBBY_WEIGHT * shared


class GraphService(Service):
    """Domain service for derived, read-only views of the social graph."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize graph service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def compute_popularity_score(self, user: User) -> float:
        """Compute a user's popularity score from current state.

        Args:
            user: Subject user

        Returns:
            Popularity score

        Raises:
            InvalidInputError: If user is None
        """
        if user is None:
            raise InvalidInputError("User cannot be null")

        friends = await self._load_friends(user)
        score = popularity_score(user, friends)
        logfire.debug(
            "Computed popularity score",
            user_id=str(user.id),
            score=score,
            friend_count=len(user.friend_ids),
        )
        return score

    async def to_transfer_shape(self, user: User) -> UserView:
        """Project a user for external consumers.

        Args:
            user: User to project

        Returns:
            User view with a freshly computed score and friend IDs only

        Raises:
            InvalidInputError: If user is None
        """
        if user is None:
            raise InvalidInputError("User cannot be null")

        return UserView(
            id=user.id,
            username=user.username,
            age=user.age,
            hobbies=user.hobbies,
            popularity_score=await self.compute_popularity_score(user),
            friend_ids=user.friend_ids,
        )

    async def to_transfer_shapes(self, users: list[User]) -> list[UserView]:
        """Project many users, loading every friend in a single query.

        Args:
            users: Users to project

        Returns:
            User views in the same order as ``users``
        """
        friend_ids = {fid for user in users for fid in user.friend_ids}
        known = {user.id: user for user in users}
        missing = [fid for fid in friend_ids if fid not in known]
        if missing:
            for friend in await self.user_repository.find_by_ids(missing):
                known[friend.id] = friend

        return [
            UserView(
                id=user.id,
                username=user.username,
                age=user.age,
                hobbies=user.hobbies,
                popularity_score=popularity_score(
                    user, (known[fid] for fid in user.friend_ids if fid in known)
                ),
                friend_ids=user.friend_ids,
            )
            for user in users
        ]

    async def get_graph_data(self) -> GraphData:
        """Export every user as a node and every friendship as two edges.

        Algorithm:
        1. Fetch all users once
        2. Score each user against the in-memory user map
        3. Emit one edge per (user, friend) pair, i.e. both directions

        Returns:
            Graph with nodes and directed edges
        """
        with logfire.span("graph_service.get_graph_data"):
            users = await self.user_repository.find_all()
            by_id = {user.id: user for user in users}

            nodes = [
                GraphNode(
                    id=str(user.id),
                    username=user.username,
                    age=user.age,
                    popularity_score=popularity_score(
                        user, (by_id[fid] for fid in user.friend_ids if fid in by_id)
                    ),
                )
                for user in users
            ]

            edges = [
                GraphEdge(source=str(user.id), target=str(friend_id))
                for user in users
                for friend_id in sorted(user.friend_ids, key=str)
            ]

            logfire.info(
                "Graph data generated", node_count=len(nodes), edge_count=len(edges)
            )
            return GraphData(nodes=nodes, edges=edges)

    async def _load_friends(self, user: User) -> list[User]:
        if not user.friend_ids:
            return []
        return await self.user_repository.find_by_ids(list(user.friend_ids))
