"""User use cases."""

from .common import UserResponse
from .create_user import CreateUserRequest, CreateUserUseCase
from .delete_user import DeleteUserRequest, DeleteUserUseCase
from .get_user import GetUserRequest, GetUserUseCase
from .list_users import ListUsersUseCase
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "CreateUserRequest",
    "CreateUserUseCase",
    "DeleteUserRequest",
    "DeleteUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserResponse",
]
