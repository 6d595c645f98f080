"""Update user use case."""

from uuid import UUID

from pydantic import Field

from circle.application.usecase.base import CamelModel
from circle.application.usecase.user.common import UserResponse
from circle.domain.service import GraphService, UserService
from circle.domain.value import Hobby, UserDraft, UserId, Username


class UpdateUserRequest(CamelModel):
    """Update user request.

    Replaces username, age and hobbies; omitted hobbies clear the set.
    """

    user_id: UUID
    username: Username
    age: int = Field(ge=1)
    hobbies: set[Hobby] | None = None


class UpdateUserUseCase:
    """Use case for replacing a user's editable fields.

    Friendships and creation time cannot be changed through this use case.
    """

    def __init__(self, user_service: UserService, graph_service: GraphService) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
            graph_service: Graph domain service
        """
        self.user_service = user_service
        self.graph_service = graph_service

    async def execute(self, request: UpdateUserRequest) -> UserResponse:
        """Execute update user flow.

        Args:
            request: User ID plus the new field values

        Returns:
            The updated user

        Raises:
            NotFoundError: If user not found
        """
        patch = UserDraft(
            username=request.username,
            age=request.age,
            hobbies=frozenset(request.hobbies) if request.hobbies is not None else None,
        )
        user = await self.user_service.update_user(UserId(request.user_id), patch)
        view = await self.graph_service.to_transfer_shape(user)
        return UserResponse.from_view(view)
