"""Directed weighted graph stored as an adjacency mapping.

Each registered vertex maps to an ordered mapping of neighbour to edge
weight. A vertex may appear only as the head of an edge without being
registered itself; looking up its neighbours returns an empty list.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..domain.models import Edge, Vertex, Weight

Adjacency = Dict[Vertex, Dict[Vertex, Weight]]
GraphLike = Mapping[Vertex, Mapping[Vertex, Weight]]


class Graph:
    """Directed graph with weighted edges.

    Weights are not checked for sign here; the engine can reject
    negative weights when configured to.

    Attributes:
        adjacency: Vertex -> {neighbour: weight}, in insertion order
    """

    def __init__(self, adjacency: Optional[Union[Graph, GraphLike]] = None) -> None:
        self.adjacency: Adjacency = {}
        if isinstance(adjacency, Graph):
            # Copy, never alias, another graph's adjacency.
            adjacency = adjacency.adjacency
        if adjacency:
            for vertex, neighbours in adjacency.items():
                self.add_vertex(vertex)
                for neighbour, weight in neighbours.items():
                    self.add_edge(vertex, neighbour, weight)

    @classmethod
    def from_mapping(cls, mapping: Union[Graph, GraphLike]) -> Graph:
        """Build a graph from ``{vertex: {neighbour: weight}}`` or another Graph.

        Example:
            >>> g = Graph.from_mapping({"A": {"B": 2}, "B": {}})
            >>> g.neighbors("A")
            [('B', 2)]
        """
        return cls(mapping)

    @classmethod
    def from_edges(
        cls, edges: Iterable[Union[Edge, Tuple[Vertex, Vertex, Weight]]]
    ) -> Graph:
        """Build a graph from ``Edge`` objects or ``(u, v, w)`` triples."""
        graph = cls()
        for edge in edges:
            if isinstance(edge, Edge):
                graph.add_edge(edge.source, edge.target, edge.weight)
            else:
                source, target, weight = edge
                graph.add_edge(source, target, weight)
        return graph

    def add_vertex(self, vertex: Vertex) -> None:
        """Register ``vertex`` with no outgoing edges if it is new."""
        self.adjacency.setdefault(vertex, {})

    def add_edge(self, source: Vertex, target: Vertex, weight: Weight) -> None:
        """Add or overwrite the directed edge ``source -> target``.

        Only ``source`` becomes a registered vertex.
        """
        self.adjacency.setdefault(source, {})[target] = weight

    def neighbors(self, vertex: Vertex) -> List[Tuple[Vertex, Weight]]:
        """Return ``(neighbour, weight)`` pairs leaving ``vertex``.

        Unknown vertices have no neighbours.
        """
        return list(self.adjacency.get(vertex, {}).items())

    def weight(self, source: Vertex, target: Vertex) -> Optional[Weight]:
        """Return the weight of ``source -> target``, or None if absent."""
        return self.adjacency.get(source, {}).get(target)

    def vertices(self) -> List[Vertex]:
        """Registered vertices, in insertion order."""
        return list(self.adjacency)

    def edges(self) -> List[Edge]:
        """All edges, grouped by source in insertion order."""
        return [
            Edge(source, target, weight)
            for source, neighbours in self.adjacency.items()
            for target, weight in neighbours.items()
        ]

    def to_dict(self) -> Adjacency:
        """Return a deep copy of the adjacency mapping."""
        return {vertex: dict(neighbours) for vertex, neighbours in self.adjacency.items()}

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.adjacency)

    def __repr__(self) -> str:
        edge_count = sum(len(n) for n in self.adjacency.values())
        return f"Graph(vertices={len(self.adjacency)}, edges={edge_count})"
