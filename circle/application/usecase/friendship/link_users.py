"""Link users use case."""

from uuid import UUID

from circle.application.usecase.base import CamelModel, MessageResponse
from circle.domain.service import FriendshipService
from circle.domain.value import UserId


class LinkUsersRequest(CamelModel):
    """Link users request."""

    user_id: UUID
    friend_id: UUID


class LinkUsersUseCase:
    """Use case for making two users friends."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        """Initialize link users use case.

        Args:
            friendship_service: Friendship domain service
        """
        self.friendship_service = friendship_service

    async def execute(self, request: LinkUsersRequest) -> MessageResponse:
        """Execute link flow.

        Raises:
            RelationshipConflictError: If self-link or already friends
            NotFoundError: If either user does not exist
        """
        await self.friendship_service.link_users(
            UserId(request.user_id), UserId(request.friend_id)
        )
        return MessageResponse(success=True, message="Users linked successfully")
