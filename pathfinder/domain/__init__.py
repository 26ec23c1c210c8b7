"""Domain layer - Result models and typed errors.

No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EmptyQueueError,
    NegativeWeightError,
    NoRouteFoundError,
    PathfinderError,
    PredecessorCycleError,
)
from .models import (
    INFINITY,
    Edge,
    RouteResult,
    SearchStats,
    ShortestPathTree,
    Vertex,
    Weight,
)

__all__ = [
    # Models
    "INFINITY",
    "Vertex",
    "Weight",
    "Edge",
    "SearchStats",
    "ShortestPathTree",
    "RouteResult",
    # Errors
    "PathfinderError",
    "EmptyQueueError",
    "NegativeWeightError",
    "NoRouteFoundError",
    "PredecessorCycleError",
    "ConfigurationError",
]
