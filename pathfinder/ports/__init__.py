"""Ports layer - Protocols the routing service depends on.

Adapters in ``pathfinder.adapters`` implement these; tests can swap
in their own implementations.
"""

from .cache import CachePort
from .engine import ShortestPathEnginePort

__all__ = ["CachePort", "ShortestPathEnginePort"]
