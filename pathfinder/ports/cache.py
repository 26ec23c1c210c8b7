"""Cache port - Injectable caching abstraction.

Used by the routing service to memoise shortest-path trees per
source vertex.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, List, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Caching disabled
    """

    def get(self, key: Hashable) -> Optional[T]:
        """Return the cached value, or None if not found or expired."""
        ...

    def set(self, key: Hashable, value: T) -> None:
        """Store ``value`` under ``key``."""
        ...

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        ...

    def clear(self) -> int:
        """Clear all entries; return how many were removed."""
        ...

    def invalidate(self, key: Hashable) -> bool:
        """Drop one entry; return True if it existed."""
        ...

    def size(self) -> int:
        """Return the number of entries in the cache."""
        ...

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counts, hit rate and size."""
        ...

    def keys(self) -> List[Hashable]:
        """Return the cached keys."""
        ...
