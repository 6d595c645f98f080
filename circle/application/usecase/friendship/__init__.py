"""Friendship use cases."""

from .link_users import LinkUsersRequest, LinkUsersUseCase
from .unlink_users import UnlinkUsersRequest, UnlinkUsersUseCase

__all__ = [
    "LinkUsersRequest",
    "LinkUsersUseCase",
    "UnlinkUsersRequest",
    "UnlinkUsersUseCase",
]
