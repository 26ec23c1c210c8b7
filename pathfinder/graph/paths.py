"""Path reconstruction from a predecessor map."""

from __future__ import annotations

from typing import List, Mapping, Optional

from ..domain.errors import PredecessorCycleError
from ..domain.models import Vertex


def reconstruct_path(
    predecessors: Mapping[Vertex, Optional[Vertex]],
    source: Vertex,
    target: Vertex,
) -> Optional[List[Vertex]]:
    """Walk predecessor links back from ``target`` to ``source``.

    Args:
        predecessors: Vertex -> previous vertex on its best path, or None.
        source: Vertex the predecessor map was built from.
        target: Vertex to build the path to.

    Returns:
        The vertices from ``source`` to ``target`` inclusive, or None when
        the chain ends before reaching ``source`` (target unreachable).
        A partial path is never returned.

    Raises:
        PredecessorCycleError: If the chain revisits a vertex.
    """
    if target == source:
        return [source]

    path: List[Vertex] = [target]
    seen = {target}
    current = target
    while current != source:
        previous = predecessors.get(current)
        if previous is None:
            return None
        if previous in seen:
            raise PredecessorCycleError(
                f"Predecessor chain from {target!r} loops at {previous!r}",
                vertex=previous,
            )
        seen.add(previous)
        path.append(previous)
        current = previous

    path.reverse()
    return path
