"""Mock persistence providers for testing."""

from dishka import Scope, provide

from circle.domain.repository import UserRepository
from circle.persistence.repository.inmemory import InMemoryUserRepository
from circle.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope so state survives across requests of one container (needed by
    the HTTP tests); every test builds its own container, which keeps tests
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()
