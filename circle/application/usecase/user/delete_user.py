"""Delete user use case."""

from uuid import UUID

from circle.application.usecase.base import CamelModel, MessageResponse
from circle.domain.service import UserService
from circle.domain.value import UserId


class DeleteUserRequest(CamelModel):
    """Delete user request."""

    user_id: UUID


class DeleteUserUseCase:
    """Use case for deleting a user that has no friends left."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> MessageResponse:
        """Execute delete user flow.

        Raises:
            NotFoundError: If user not found
            RelationshipConflictError: If the user still has friends
        """
        await self.user_service.delete_user(UserId(request.user_id))
        return MessageResponse(success=True, message="User deleted successfully")
