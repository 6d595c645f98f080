"""PostgreSQL repository implementations."""

from circle.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
]
