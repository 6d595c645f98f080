"""Create user use case."""

from pydantic import Field

from circle.application.usecase.base import CamelModel
from circle.application.usecase.user.common import UserResponse
from circle.domain.service import GraphService, UserService
from circle.domain.value import Hobby, UserDraft, Username


class CreateUserRequest(CamelModel):
    """Create user request."""

    username: Username
    age: int = Field(ge=1)
    hobbies: set[Hobby] | None = None


class CreateUserUseCase:
    """Use case for registering a new user.

    Usernames must be unique; ID and creation time are assigned here.
    """

    def __init__(self, user_service: UserService, graph_service: GraphService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
            graph_service: Graph domain service (for the transfer shape)
        """
        self.user_service = user_service
        self.graph_service = graph_service

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """Execute create user flow.

        Args:
            request: New user's username, age and hobbies

        Returns:
            The created user

        Raises:
            RelationshipConflictError: If the username is already taken
        """
        draft = UserDraft(
            username=request.username,
            age=request.age,
            hobbies=frozenset(request.hobbies) if request.hobbies is not None else None,
        )
        user = await self.user_service.create_user(draft)
        view = await self.graph_service.to_transfer_shape(user)
        return UserResponse.from_view(view)
