"""User and friendship routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import Field

from circle.application.usecase.base import CamelModel, MessageResponse
from circle.application.usecase.friendship import (
    LinkUsersRequest,
    LinkUsersUseCase,
    UnlinkUsersRequest,
    UnlinkUsersUseCase,
)
from circle.application.usecase.graph import GetGraphResponse, GetGraphUseCase
from circle.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    DeleteUserRequest,
    DeleteUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserResponse,
)
from circle.domain.value import Hobby, Username

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)


class UserAPIRequest(CamelModel):
    """API request body for creating or replacing a user."""

    username: Username
    age: int = Field(ge=1)
    hobbies: set[Hobby] | None = None


@router.get("", response_model=list[UserResponse])
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> list[UserResponse]:
    """List all users with their popularity scores."""
    return await list_users_use_case.execute()


@router.get("/graph", response_model=GetGraphResponse)
async def get_graph(
    get_graph_use_case: FromDishka[GetGraphUseCase],
) -> GetGraphResponse:
    """Export the friendship graph.

    Example:
        GET /api/users/graph

        Response:
        {
            "nodes": [
                {"id": "6f1c", "username": "alice", "age": 30, "popularityScore": 1.5},
                {"id": "93ab", "username": "bob", "age": 25, "popularityScore": 1.5}
            ],
            "edges": [
                {"source": "6f1c", "target": "93ab"},
                {"source": "93ab", "target": "6f1c"}
            ]
        }
    """
    return await get_graph_use_case.execute()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Get a single user by ID.

    Raises:
        NotFoundError: If user not found (404)
    """
    return await get_user_use_case.execute(GetUserRequest(user_id=user_id))


@router.post("", response_model=UserResponse)
async def create_user(
    request: UserAPIRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> UserResponse:
    """Create a user.

    Example:
        POST /api/users

        Request:
        {"username": "alice", "age": 30, "hobbies": ["Reading"]}

    Raises:
        RelationshipConflictError: If the username is taken (409)
    """
    return await create_user_use_case.execute(
        CreateUserRequest(
            username=request.username, age=request.age, hobbies=request.hobbies
        )
    )


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
) -> UserResponse:
    """Replace a user's username, age and hobbies.

    Raises:
        NotFoundError: If user not found (404)
    """
    return await update_user_use_case.execute(
        UpdateUserRequest(
            user_id=user_id,
            username=request.username,
            age=request.age,
            hobbies=request.hobbies,
        )
    )


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: UUID,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
) -> MessageResponse:
    """Delete a user that has no friends.

    Raises:
        NotFoundError: If user not found (404)
        RelationshipConflictError: If the user still has friends (409)
    """
    return await delete_user_use_case.execute(DeleteUserRequest(user_id=user_id))


@router.post("/{user_id}/link", response_model=MessageResponse)
async def link_users(
    user_id: UUID,
    link_users_use_case: FromDishka[LinkUsersUseCase],
    friend_id: UUID = Query(alias="friendId"),
) -> MessageResponse:
    """Make two users friends.

    Example:
        POST /api/users/6f1c.../link?friendId=93ab...

    Raises:
        RelationshipConflictError: Self-link or already friends (409)
        NotFoundError: If either user is unknown (404)
    """
    return await link_users_use_case.execute(
        LinkUsersRequest(user_id=user_id, friend_id=friend_id)
    )


@router.delete("/{user_id}/unlink", response_model=MessageResponse)
async def unlink_users(
    user_id: UUID,
    unlink_users_use_case: FromDishka[UnlinkUsersUseCase],
    friend_id: UUID = Query(alias="friendId"),
) -> MessageResponse:
    """End a friendship.

    Raises:
        RelationshipConflictError: If the users are not friends (409)
        NotFoundError: If either user is unknown (404)
    """
    return await unlink_users_use_case.execute(
        UnlinkUsersRequest(user_id=user_id, friend_id=friend_id)
    )
