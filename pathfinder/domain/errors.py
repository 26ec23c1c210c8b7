"""Typed domain errors for the shortest-path engine.

All errors inherit from PathfinderError and can optionally wrap a root
cause exception for debugging.

An unreachable target is not an error: ``reconstruct_path`` returns
``None`` for it. Only ``RoutingService.route`` turns that result into
a NoRouteFoundError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional


@dataclass
class PathfinderError(Exception):
    """Base error for the pathfinder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class EmptyQueueError(PathfinderError):
    """Extract or peek attempted on an empty priority queue.

    The engine guards every pop with a size check, so seeing this
    error means an internal invariant was broken.
    """


@dataclass
class NegativeWeightError(PathfinderError):
    """An edge with a negative weight was rejected before a run.

    Only raised when negative-weight rejection is enabled.

    Attributes:
        source: Tail vertex of the offending edge
        target: Head vertex of the offending edge
        weight: The negative weight
    """

    source: Optional[Hashable] = None
    target: Optional[Hashable] = None
    weight: Any = None


@dataclass
class NoRouteFoundError(PathfinderError):
    """No path exists between the requested vertices.

    Attributes:
        source: Source vertex
        target: Target vertex
    """

    source: Optional[Hashable] = None
    target: Optional[Hashable] = None


@dataclass
class PredecessorCycleError(PathfinderError):
    """A predecessor map links back on itself.

    Attributes:
        vertex: First vertex seen twice while walking the chain
    """

    vertex: Optional[Hashable] = None


@dataclass
class ConfigurationError(PathfinderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
