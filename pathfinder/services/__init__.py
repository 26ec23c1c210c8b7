"""Services layer - Application orchestration.

Available services:
- RoutingService: Cached shortest-path queries over one graph
"""

from .routing import RoutingService

__all__ = ["RoutingService"]
