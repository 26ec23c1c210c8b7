"""Graph model and path-finding algorithms.

This subpackage holds the in-memory graph, the binary-heap frontier,
the Dijkstra search and path reconstruction.
"""

from .dijkstra import search, shortest_paths
from .model import Graph
from .paths import reconstruct_path
from .priority_queue import PriorityQueue

__all__ = ["Graph", "PriorityQueue", "search", "shortest_paths", "reconstruct_path"]
