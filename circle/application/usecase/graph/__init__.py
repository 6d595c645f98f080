"""Graph use cases."""

from .get_graph import (
    GetGraphResponse,
    GetGraphUseCase,
    GraphEdgeResponse,
    GraphNodeResponse,
)

__all__ = [
    "GetGraphResponse",
    "GetGraphUseCase",
    "GraphEdgeResponse",
    "GraphNodeResponse",
]
