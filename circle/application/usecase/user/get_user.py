"""Get user use case."""

from uuid import UUID

from circle.application.usecase.base import CamelModel
from circle.application.usecase.user.common import UserResponse
from circle.domain.service import GraphService, UserService
from circle.domain.value import UserId


class GetUserRequest(CamelModel):
    """Get user request."""

    user_id: UUID


class GetUserUseCase:
    """Use case for fetching a single user with its popularity score."""

    def __init__(self, user_service: UserService, graph_service: GraphService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
            graph_service: Graph domain service
        """
        self.user_service = user_service
        self.graph_service = graph_service

    async def execute(self, request: GetUserRequest) -> UserResponse:
        """Execute get user flow.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        view = await self.graph_service.to_transfer_shape(user)
        return UserResponse.from_view(view)
