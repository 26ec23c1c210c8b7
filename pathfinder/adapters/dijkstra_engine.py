"""Dijkstra engine adapter.

Wraps ``graph.dijkstra.search`` and adds:
- Configuration injection (stale skipping, negative-weight rejection)
- Logging of each run and its counters
- An injectable frontier factory
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Union

from ..config import EngineConfig, get_config
from ..domain.errors import NegativeWeightError
from ..domain.models import ShortestPathTree, Vertex, Weight
from ..graph.dijkstra import QueueFactory, search
from ..graph.model import Graph
from ..graph.priority_queue import PriorityQueue
from ..monitoring import describe_stats


@dataclass
class DijkstraEngine:
    """Shortest-path engine using Dijkstra's algorithm.

    Implements ShortestPathEnginePort.

    Attributes:
        config: Engine configuration
        queue_factory: Builds a fresh frontier for each run
    """

    config: EngineConfig = field(default_factory=lambda: get_config().engine)
    queue_factory: QueueFactory = field(default=PriorityQueue, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def run(
        self,
        graph: Union[Graph, Mapping[Vertex, Mapping[Vertex, Weight]]],
        source: Vertex,
    ) -> ShortestPathTree:
        """Compute shortest paths from ``source``.

        Args:
            graph: A Graph or a ``{vertex: {neighbour: weight}}`` mapping.
            source: Start vertex.

        Returns:
            ShortestPathTree with distances, predecessors and counters.

        Raises:
            NegativeWeightError: If negative weights are rejected by
                configuration and the graph has one.
        """
        self._logger.debug(
            "Running shortest-path search",
            extra={
                "source": repr(source),
                "skip_stale": self.config.skip_stale,
            },
        )

        try:
            tree = search(
                graph,
                source,
                skip_stale=self.config.skip_stale,
                reject_negative=self.config.reject_negative_weights,
                queue_factory=self.queue_factory,
            )
        except NegativeWeightError as e:
            self._logger.warning(
                "Graph rejected",
                extra={"source": repr(e.source), "target": repr(e.target)},
            )
            raise

        self._logger.info(
            "Search finished from %r: %s",
            source,
            describe_stats(tree.stats),
            extra={"reachable": len(tree.reachable)},
        )
        return tree
