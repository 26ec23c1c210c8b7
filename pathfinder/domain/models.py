"""Immutable domain models for the pathfinder engine.

All models are frozen dataclasses with slots. They carry results out
of the engine and the routing service; the graph itself lives in
``pathfinder.graph.model``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Hashable, List, Mapping, Optional, Union

Vertex = Hashable
Weight = Union[int, float]

# Distance of a vertex no path has reached yet.
INFINITY = math.inf


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted edge.

    Attributes:
        source: Tail vertex
        target: Head vertex
        weight: Edge cost, expected to be non-negative
    """

    source: Vertex
    target: Vertex
    weight: Weight


@dataclass(frozen=True, slots=True)
class SearchStats:
    """Counters collected during one engine run.

    Attributes:
        pushes: Entries inserted into the frontier
        pops: Entries extracted from the frontier
        stale_pops: Popped entries whose priority was worse than the
            vertex's best distance at pop time
        relaxations: Successful relaxations (distance improvements)
    """

    pushes: int = 0
    pops: int = 0
    stale_pops: int = 0
    relaxations: int = 0


@dataclass(frozen=True, slots=True)
class ShortestPathTree:
    """Distances and predecessors from a single source.

    Attributes:
        source: The vertex the search started from
        distances: Read-only best distance per vertex (INFINITY when unreached)
        predecessors: Read-only previous vertex on the best path, or None
        stats: Counters from the run that produced this tree
    """

    source: Vertex
    distances: Mapping[Vertex, Weight]
    predecessors: Mapping[Vertex, Optional[Vertex]]
    stats: SearchStats = field(default_factory=SearchStats)

    def distance_to(self, vertex: Vertex) -> Weight:
        """Return the distance to ``vertex``, INFINITY if never reached."""
        return self.distances.get(vertex, INFINITY)

    def is_reachable(self, vertex: Vertex) -> bool:
        """Check if a finite-cost path to ``vertex`` exists."""
        return self.distance_to(vertex) != INFINITY

    def path_to(self, vertex: Vertex) -> Optional[List[Vertex]]:
        """Return the path from the source to ``vertex``, or None."""
        from ..graph.paths import reconstruct_path

        return reconstruct_path(self.predecessors, self.source, vertex)

    @property
    def reachable(self) -> List[Vertex]:
        """Vertices with a finite distance, source included."""
        return [v for v, d in self.distances.items() if d != INFINITY]


@dataclass(frozen=True, slots=True)
class RouteResult:
    """A single source-to-target route.

    Attributes:
        path: Ordered tuple of vertices from source to target
        total_distance: Sum of edge weights along the path
    """

    path: tuple[Vertex, ...]
    total_distance: Weight

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of vertices on the route."""
        return len(self.path)

    @classmethod
    def empty(cls) -> RouteResult:
        """Result used when the target cannot be reached."""
        return cls(path=(), total_distance=INFINITY)
