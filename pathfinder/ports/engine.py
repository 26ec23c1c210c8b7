"""Engine port - Abstraction over single-source shortest-path solvers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, Union

if TYPE_CHECKING:
    from ..domain.models import ShortestPathTree, Vertex, Weight
    from ..graph.model import Graph

    GraphInput = Union[Graph, Mapping[Vertex, Mapping[Vertex, Weight]]]


class ShortestPathEnginePort(Protocol):
    """Port for shortest-path computation.

    Implementation: adapters/dijkstra_engine.py

    Implementations must not mutate the graph and must build fresh
    distance and predecessor maps on every call.
    """

    def run(self, graph: GraphInput, source: Vertex) -> ShortestPathTree:
        """Compute shortest paths from ``source`` to every vertex.

        Args:
            graph: The graph to search.
            source: Start vertex.

        Returns:
            ShortestPathTree holding distances and predecessors.
        """
        ...
