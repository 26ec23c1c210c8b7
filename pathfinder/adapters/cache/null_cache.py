"""No-op cache used when caching is disabled."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class NullCache(Generic[T]):
    """CachePort implementation that never stores anything.

    Every ``get_or_compute`` calls the compute function, so each query
    runs a fresh search.
    """

    name: str = "null"

    def get(self, key: Hashable) -> Optional[T]:
        return None

    def set(self, key: Hashable, value: T, ttl: Optional[float] = None) -> None:
        pass

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        return compute_fn()

    def clear(self) -> int:
        return 0

    def invalidate(self, key: Hashable) -> bool:
        return False

    def size(self) -> int:
        return 0

    def stats(self) -> Dict[str, Any]:
        """Return statistics in the same shape as InMemoryCache.stats()."""
        return {"size": 0, "hits": 0, "misses": 0, "hit_rate_percent": 0.0}

    def keys(self) -> List[Hashable]:
        return []
