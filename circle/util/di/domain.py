"""Domain layer DI providers."""

from dishka import Scope, provide

from circle.domain.repository import UserRepository
from circle.domain.service import FriendshipService, GraphService, UserService
from circle.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_friendship_service(
        self, user_repository: UserRepository
    ) -> FriendshipService:
        """Provide friendship domain service."""
        return FriendshipService(user_repository=user_repository)

    @provide
    def get_graph_service(self, user_repository: UserRepository) -> GraphService:
        """Provide graph domain service."""
        return GraphService(user_repository=user_repository)
