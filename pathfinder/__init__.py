"""Single-source shortest paths over weighted directed graphs.

The core entry points are ``shortest_paths`` (distance and predecessor
maps from one source) and ``reconstruct_path`` (the vertex sequence to
one target). ``RoutingService`` adds configuration, logging and
per-source caching on top of them.
"""

from .domain import (
    INFINITY,
    Edge,
    EmptyQueueError,
    NegativeWeightError,
    NoRouteFoundError,
    PathfinderError,
    RouteResult,
    ShortestPathTree,
)
from .graph import Graph, PriorityQueue, reconstruct_path, search, shortest_paths
from .services import RoutingService

__all__ = [
    "INFINITY",
    "Edge",
    "Graph",
    "PriorityQueue",
    "RouteResult",
    "ShortestPathTree",
    "RoutingService",
    "search",
    "shortest_paths",
    "reconstruct_path",
    "PathfinderError",
    "EmptyQueueError",
    "NegativeWeightError",
    "NoRouteFoundError",
]
