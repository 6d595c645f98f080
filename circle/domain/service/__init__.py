"""Domain services."""

from .base import Service
from .friendship_service import FriendshipService
from .graph_service import (
    GraphData,
    GraphEdge,
    GraphNode,
    GraphService,
    UserView,
    popularity_score,
)
from .user_service import UserService

__all__ = [
    "FriendshipService",
    "GraphData",
    "GraphEdge",
    "GraphNode",
    "GraphService",
    "Service",
    "UserService",
    "UserView",
    "popularity_score",
]
