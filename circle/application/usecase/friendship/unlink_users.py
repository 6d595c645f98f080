"""Unlink users use case."""

from uuid import UUID

from circle.application.usecase.base import CamelModel, MessageResponse
from circle.domain.service import FriendshipService
from circle.domain.value import UserId


class UnlinkUsersRequest(CamelModel):
    """Unlink users request."""

    user_id: UUID
    friend_id: UUID


class UnlinkUsersUseCase:
    """Use case for ending a friendship."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        self.friendship_service = friendship_service

    async def execute(self, request: UnlinkUsersRequest) -> MessageResponse:
        """Execute unlink flow.

        Raises:
            RelationshipConflictError: If the users are not friends
            NotFoundError: If either user does not exist
        """
        await self.friendship_service.unlink_users(
            UserId(request.user_id), UserId(request.friend_id)
        )
        return MessageResponse(success=True, message="Users unlinked successfully")
