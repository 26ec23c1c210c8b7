"""Single-source shortest paths using Dijkstra's algorithm.

The frontier is an insert-only binary heap: an improved vertex is
pushed again instead of having its key decreased, so the queue may
hold stale entries. By default stale entries are processed like any
other. Their relaxations can never pass the ``alt < best`` test once a
better distance has won, so the output is unaffected. ``skip_stale``
drops them on pop instead, which saves work without changing results.

Edge weights are assumed non-negative. With negative weights the
distances are not guaranteed to be shortest, and nothing here detects
negative cycles.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Dict, Optional, Tuple, Union

from ..domain.errors import NegativeWeightError
from ..domain.models import INFINITY, SearchStats, ShortestPathTree, Vertex, Weight
from .model import Graph, GraphLike
from .priority_queue import PriorityQueue

Distances = Dict[Vertex, Weight]
Predecessors = Dict[Vertex, Optional[Vertex]]
QueueFactory = Callable[[], PriorityQueue]


def as_graph(graph: Union[Graph, GraphLike]) -> Graph:
    """Return ``graph`` as a Graph, converting plain mappings."""
    if isinstance(graph, Graph):
        return graph
    return Graph.from_mapping(graph)


def check_non_negative(graph: Graph) -> None:
    """Raise on the first edge with a negative weight.

    Raises:
        NegativeWeightError: If any edge weight is below zero.
    """
    for edge in graph.edges():
        if edge.weight < 0:
            raise NegativeWeightError(
                f"Negative weight {edge.weight!r} on edge "
                f"{edge.source!r} -> {edge.target!r}",
                source=edge.source,
                target=edge.target,
                weight=edge.weight,
            )


def search(
    graph: Union[Graph, GraphLike],
    source: Vertex,
    *,
    skip_stale: bool = False,
    reject_negative: bool = False,
    queue_factory: QueueFactory = PriorityQueue,
) -> ShortestPathTree:
    """Run Dijkstra from ``source`` and return the full search result.

    Args:
        graph: A Graph or a ``{vertex: {neighbour: weight}}`` mapping.
        source: Start vertex. It does not have to be in the graph.
        skip_stale: Skip popped entries whose priority is worse than the
            vertex's current best distance.
        reject_negative: Scan all edges first and fail on a negative weight.
        queue_factory: Builds the frontier; must return an empty
            PriorityQueue-compatible object.

    Returns:
        ShortestPathTree with distances, predecessors and run counters.
        Both maps are read-only views; the tree may be shared and cached.

    Raises:
        NegativeWeightError: If ``reject_negative`` is set and an edge
            weight is negative.
    """
    graph = as_graph(graph)
    if reject_negative:
        check_non_negative(graph)

    distances: Distances = {vertex: INFINITY for vertex in graph.vertices()}
    predecessors: Predecessors = {vertex: None for vertex in graph.vertices()}
    distances[source] = 0
    predecessors[source] = None

    pushes = pops = stale_pops = relaxations = 0

    queue = queue_factory()
    queue.push(source, 0)
    pushes += 1

    while not queue.is_empty():
        u, priority = queue.pop_min()
        pops += 1

        if priority > distances[u]:
            stale_pops += 1
            if skip_stale:
                continue

        for v, weight in graph.neighbors(u):
            alt = distances[u] + weight
            if alt < distances.get(v, INFINITY):
                distances[v] = alt
                predecessors[v] = u
                relaxations += 1
                queue.push(v, alt)
                pushes += 1

    return ShortestPathTree(
        source=source,
        distances=MappingProxyType(distances),
        predecessors=MappingProxyType(predecessors),
        stats=SearchStats(
            pushes=pushes,
            pops=pops,
            stale_pops=stale_pops,
            relaxations=relaxations,
        ),
    )


def shortest_paths(
    graph: Union[Graph, GraphLike],
    source: Vertex,
    *,
    skip_stale: bool = False,
    reject_negative: bool = False,
) -> Tuple[Distances, Predecessors]:
    """Compute shortest distances and predecessors from ``source``.

    Vertices registered in the graph but unreachable keep distance
    INFINITY and predecessor None. Vertices that only appear as edge
    heads and are never reached are absent from both maps.

    Example:
        >>> dist, prev = shortest_paths({"A": {"B": 2}, "B": {}}, "A")
        >>> dist
        {'A': 0, 'B': 2}
        >>> prev
        {'A': None, 'B': 'A'}
    """
    tree = search(
        graph,
        source,
        skip_stale=skip_stale,
        reject_negative=reject_negative,
    )
    return dict(tree.distances), dict(tree.predecessors)
