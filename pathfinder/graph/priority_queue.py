"""Binary min-heap used as the search frontier.

Entries are ``(vertex, priority)`` pairs. The queue never deduplicates:
pushing a vertex that is already queued adds a second entry, and the
caller decides what to do with the stale one when it is popped.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, Iterator, List, Tuple, TypeVar

from ..domain.errors import EmptyQueueError

V = TypeVar("V")
P = TypeVar("P")


class PriorityQueue(Generic[V, P]):
    """Insert-only min-heap keyed by priority.

    Equal priorities come out in insertion order. A running counter
    sits between the priority and the vertex in every heap entry, so
    vertices themselves are never compared.

    Example:
        >>> pq = PriorityQueue()
        >>> pq.push("B", 2)
        >>> pq.push("A", 2)
        >>> pq.pop_min()
        ('B', 2)
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[P, int, V]] = []
        self._counter: Iterator[int] = itertools.count()

    def push(self, vertex: V, priority: P) -> None:
        """Insert a new entry. O(log n)."""
        heapq.heappush(self._heap, (priority, next(self._counter), vertex))

    def pop_min(self) -> Tuple[V, P]:
        """Remove and return the entry with the smallest priority.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("pop_min() called on an empty priority queue")
        priority, _, vertex = heapq.heappop(self._heap)
        return vertex, priority

    def peek_min(self) -> Tuple[V, P]:
        """Return the smallest entry without removing it.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("peek_min() called on an empty priority queue")
        priority, _, vertex = self._heap[0]
        return vertex, priority

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
