"""Domain model entities for Circle."""

from circle.domain.model.user import User

__all__ = [
    "User",
]
