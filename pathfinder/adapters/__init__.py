"""Adapters layer - Concrete implementations of ports.

- DijkstraEngine: ShortestPathEnginePort backed by Dijkstra's algorithm
- InMemoryCache / NullCache: CachePort implementations
"""

from .cache import InMemoryCache, NullCache
from .dijkstra_engine import DijkstraEngine

__all__ = ["DijkstraEngine", "InMemoryCache", "NullCache"]
