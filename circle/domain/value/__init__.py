"""Domain value objects for Circle."""

from circle.domain.value.identifiers import UserId
from circle.domain.value.types import Hobby, UserDraft, Username

__all__ = [
    # Identifiers
    "UserId",
    # Types
    "Hobby",
    "UserDraft",
    "Username",
]
