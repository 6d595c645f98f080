"""Get graph use case."""

from circle.application.usecase.base import CamelModel
from circle.domain.service import GraphData, GraphService


class GraphNodeResponse(CamelModel):
    """Graph node for API response."""

    id: str
    username: str
    age: int
    popularity_score: float


class GraphEdgeResponse(CamelModel):
    """Directed graph edge for API response."""

    source: str
    target: str


class GetGraphResponse(CamelModel):
    """Get graph response.

    Each friendship appears twice in ``edges`` (A->B and B->A). Consumers
    that draw undirected links deduplicate on their side.
    """

    nodes: list[GraphNodeResponse]
    edges: list[GraphEdgeResponse]

    @classmethod
    def from_domain(cls, graph: GraphData) -> "GetGraphResponse":
        """Convert domain GraphData to response model."""
        return cls(
            nodes=[
                GraphNodeResponse(
                    id=node.id,
                    username=node.username.root,
                    age=node.age,
                    popularity_score=node.popularity_score,
                )
                for node in graph.nodes
            ],
            edges=[
                GraphEdgeResponse(source=edge.source, target=edge.target)
                for edge in graph.edges
            ],
        )


class GetGraphUseCase:
    """Use case for exporting the whole friendship graph."""

    def __init__(self, graph_service: GraphService) -> None:
        """Initialize get graph use case.

        Args:
            graph_service: Graph domain service
        """
        self.graph_service = graph_service

    async def execute(self) -> GetGraphResponse:
        """Execute get graph flow.

        Returns:
            Nodes with popularity scores and directed edges
        """
        graph = await self.graph_service.get_graph_data()
        return GetGraphResponse.from_domain(graph)
