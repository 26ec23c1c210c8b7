"""Routing service - Query shortest paths over one graph.

The service owns a graph, an engine and a cache of shortest-path
trees keyed by source vertex. Graph mutations made through the
service clear the cache.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from ..adapters.cache import InMemoryCache, NullCache
from ..adapters.dijkstra_engine import DijkstraEngine
from ..config import AppConfig, get_config
from ..domain.errors import NoRouteFoundError
from ..domain.models import RouteResult, ShortestPathTree, Vertex, Weight
from ..graph.dijkstra import as_graph
from ..graph.model import Graph
from ..ports.cache import CachePort
from ..ports.engine import ShortestPathEnginePort


@dataclass
class RoutingService:
    """Shortest-path queries with per-source memoisation.

    Attributes:
        graph: The graph being queried
        engine: Computes shortest-path trees
        cache: Stores one tree per source vertex
    """

    graph: Graph
    engine: ShortestPathEnginePort = field(default_factory=DijkstraEngine)
    cache: CachePort = field(default_factory=NullCache)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def create(
        cls,
        graph: Union[Graph, Mapping[Vertex, Mapping[Vertex, Weight]]],
        config: Optional[AppConfig] = None,
    ) -> RoutingService:
        """Build a service wired from configuration.

        Args:
            graph: A Graph or a ``{vertex: {neighbour: weight}}`` mapping.
            config: Optional configuration override.

        Returns:
            A RoutingService with a DijkstraEngine and the configured cache.
        """
        config = config or get_config()

        cache: CachePort
        if config.cache.enabled:
            cache = InMemoryCache[ShortestPathTree](
                max_size=config.cache.max_size,
                default_ttl_seconds=config.cache.ttl_seconds,
                name="trees",
            )
        else:
            cache = NullCache()

        return cls(
            graph=as_graph(graph),
            engine=DijkstraEngine(config=config.engine),
            cache=cache,
        )

    def tree_from(self, source: Vertex) -> ShortestPathTree:
        """Return the shortest-path tree rooted at ``source``."""
        return self.cache.get_or_compute(
            source, lambda: self.engine.run(self.graph, source)
        )

    def distances_from(self, source: Vertex) -> Dict[Vertex, Weight]:
        """Return a copy of the distance map from ``source``."""
        return dict(self.tree_from(source).distances)

    def route(self, source: Vertex, target: Vertex) -> RouteResult:
        """Find the shortest route from ``source`` to ``target``.

        Returns:
            RouteResult with the path and its total weight.

        Raises:
            NoRouteFoundError: If ``target`` is unreachable.
        """
        tree = self.tree_from(source)
        path = tree.path_to(target)

        if path is None:
            self._logger.warning(
                "No route found",
                extra={"source": repr(source), "target": repr(target)},
            )
            raise NoRouteFoundError(
                f"No path from {source!r} to {target!r}",
                source=source,
                target=target,
            )

        route = RouteResult(path=tuple(path), total_distance=tree.distance_to(target))
        self._logger.info(
            "Route found",
            extra={"stops": route.num_stops, "total_distance": route.total_distance},
        )
        return route

    def route_safe(self, source: Vertex, target: Vertex) -> RouteResult:
        """Like route(), but returns an empty RouteResult when unreachable."""
        try:
            return self.route(source, target)
        except NoRouteFoundError:
            return RouteResult.empty()

    def add_vertex(self, vertex: Vertex) -> None:
        """Register a vertex and drop cached trees."""
        self.graph.add_vertex(vertex)
        self.invalidate()

    def add_edge(self, source: Vertex, target: Vertex, weight: Weight) -> None:
        """Add or overwrite an edge and drop cached trees."""
        self.graph.add_edge(source, target, weight)
        self.invalidate()

    def invalidate(self) -> int:
        """Drop all cached trees; return how many were dropped."""
        cleared = self.cache.clear()
        if cleared:
            self._logger.debug("Route cache invalidated", extra={"entries_cleared": cleared})
        return cleared

    def format_result(self, route: RouteResult) -> str:
        """Format a route as a human-readable string."""
        if route.is_empty:
            return "No path found"
        path_str = " -> ".join(str(v) for v in route.path)
        return f"Shortest path: {path_str}\nTotal distance: {route.total_distance}"

    def describe(self, source: Vertex) -> Dict[Any, Any]:
        """Distance per vertex from ``source``, with None for unreachable."""
        tree = self.tree_from(source)
        return {
            vertex: (distance if tree.is_reachable(vertex) else None)
            for vertex, distance in tree.distances.items()
        }
