"""Application layer DI providers."""

from dishka import Scope, provide

from circle.application.usecase.friendship import LinkUsersUseCase, UnlinkUsersUseCase
from circle.application.usecase.graph import GetGraphUseCase
from circle.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from circle.domain.service import FriendshipService, GraphService, UserService
from circle.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(
        self, user_service: UserService, graph_service: GraphService
    ) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service, graph_service=graph_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(
        self, user_service: UserService, graph_service: GraphService
    ) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service, graph_service=graph_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self, user_service: UserService, graph_service: GraphService
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service, graph_service=graph_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_use_case(
        self, user_service: UserService, graph_service: GraphService
    ) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service, graph_service=graph_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    # Friendship use cases
    @provide(scope=Scope.REQUEST)
    def get_link_users_use_case(
        self, friendship_service: FriendshipService
    ) -> LinkUsersUseCase:
        """Provide link users use case."""
        return LinkUsersUseCase(friendship_service=friendship_service)

    @provide(scope=Scope.REQUEST)
    def get_unlink_users_use_case(
        self, friendship_service: FriendshipService
    ) -> UnlinkUsersUseCase:
        """Provide unlink users use case."""
        return UnlinkUsersUseCase(friendship_service=friendship_service)

    # Graph use cases
    @provide(scope=Scope.REQUEST)
    def get_get_graph_use_case(self, graph_service: GraphService) -> GetGraphUseCase:
        """Provide get graph use case."""
        return GetGraphUseCase(graph_service=graph_service)
