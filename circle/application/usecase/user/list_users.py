"""List users use case."""

from circle.application.usecase.user.common import UserResponse
from circle.domain.service import GraphService, UserService


class ListUsersUseCase:
    """Use case for listing every user with freshly computed scores."""

    def __init__(self, user_service: UserService, graph_service: GraphService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
            graph_service: Graph domain service
        """
        self.user_service = user_service
        self.graph_service = graph_service

    async def execute(self) -> list[UserResponse]:
        """Execute list users flow.

        Steps:
        1. Fetch all users
        2. Project them in one batch (friends loaded once)

        Returns:
            All users as transfer shapes
        """
        users = await self.user_service.list_users()
        views = await self.graph_service.to_transfer_shapes(users)
        return [UserResponse.from_view(view) for view in views]
