"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from circle.domain.model import User
from circle.domain.value import UserId, Username


def _to_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(
    row: Dict[str, Any],
    hobbies: Iterable[str] = (),
    friend_ids: Iterable[Any] = (),
) -> User:
    """Convert database rows to User domain model.

    Args:
        row: Users table row as dict
        hobbies: Hobby values from user_hobbies for this user
        friend_ids: friend_id values from friendships for this user

    Returns:
        User domain model
    """
    return User(
        id=UserId(_to_uuid(row["id"])),
        username=Username(row["username"]),
        age=row["age"],
        hobbies=frozenset(hobbies),
        friend_ids=frozenset(UserId(_to_uuid(fid)) for fid in friend_ids),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to a users table dict.

    Hobbies and friendships live in their own tables, see
    hobby_rows and friendship_rows.

    Args:
        user: User domain model

    Returns:
        Dictionary for the users table
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "age": user.age,
        "created_at": user.created_at,
    }


def hobby_rows(user: User) -> list[Dict[str, Any]]:
    """Rows for the user_hobbies table."""
    return [{"user_id": user.id, "hobby": hobby} for hobby in sorted(user.hobbies)]


def friendship_rows(user: User) -> list[Dict[str, Any]]:
    """Outgoing rows for the friendships table."""
    return [
        {"user_id": user.id, "friend_id": friend_id}
        for friend_id in sorted(user.friend_ids, key=str)
    ]
