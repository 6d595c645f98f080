"""Test configuration and fixtures."""

from datetime import datetime
from typing import Iterable
from uuid import uuid4

import logfire

from circle.domain.model import User
from circle.domain.value import UserId, Username

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    username: str,
    hobbies: Iterable[str] = (),
    age: int = 30,
    friend_ids: Iterable[UserId] = (),
) -> User:
    """Helper function to build test users.

    Args:
        username: Username for the user
        hobbies: Hobby tags
        age: Age (must be >= 1)
        friend_ids: Initial friend IDs (callers keep them symmetric)

    Returns:
        User domain model with a fresh ID
    """
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        age=age,
        hobbies=frozenset(hobbies),
        friend_ids=frozenset(friend_ids),
        created_at=datetime.now(),
    )
