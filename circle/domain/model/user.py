"""User aggregate root.

Users are connected to each other by undirected friendship links and carry
a set of hobby tags. The popularity score is derived from both and is never
stored on the entity.
"""

from datetime import datetime

from pydantic import Field

from circle.domain.model.common import DomainModel
from circle.domain.value import Hobby, UserId, Username


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - friend_ids is symmetric across users (kept in sync by FriendshipService)
    - friend_ids never contains the user's own id
    - created_at is fixed at creation
    """

    id: UserId
    username: Username
    age: int = Field(ge=1)
    hobbies: frozenset[Hobby] = frozenset()
    friend_ids: frozenset[UserId] = frozenset()
    created_at: datetime = Field(default_factory=datetime.now)

    def is_friend_of(self, other_id: UserId) -> bool:
        """Check whether ``other_id`` is in this user's friend set."""
        return other_id in self.friend_ids

    def with_friend(self, friend_id: UserId) -> "User":
        """Return a copy with ``friend_id`` added to the friend set."""
        return self.model_copy(update={"friend_ids": self.friend_ids | {friend_id}})

    def without_friend(self, friend_id: UserId) -> "User":
        """Return a copy with ``friend_id`` removed from the friend set."""
        return self.model_copy(update={"friend_ids": self.friend_ids - {friend_id}})
