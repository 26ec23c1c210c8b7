"""Thread-safe in-memory cache with LRU eviction.

Features:
- Thread-safe with RLock
- Least-recently-used eviction once ``max_size`` is reached
- Optional TTL (time-to-live)
- Hit/miss statistics
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

T = TypeVar("T")

_MISSING = object()


@dataclass
class InMemoryCache(Generic[T]):
    """In-memory cache implementing CachePort.

    Attributes:
        max_size: Maximum number of entries (None = unlimited)
        default_ttl_seconds: Time-to-live for entries (None = no expiry)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[ShortestPathTree](name="trees", max_size=64)
        tree = cache.get_or_compute("A", lambda: engine.run(graph, "A"))
    """

    max_size: Optional[int] = None
    default_ttl_seconds: Optional[float] = None
    name: str = "cache"

    _store: "OrderedDict[Hashable, Tuple[Any, float]]" = field(
        default_factory=OrderedDict, repr=False
    )
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"pathfinder.cache.{self.name}")

    def _lookup(self, key: Hashable) -> Any:
        """Return the stored value or _MISSING, updating stats and recency."""
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                self._misses += 1
                return _MISSING

            value, expiry = entry
            if time.monotonic() > expiry:
                del self._store[key]
                self._logger.debug("Cache entry expired", extra={"key": repr(key)})
                self._misses += 1
                return _MISSING

            self._store.move_to_end(key)
            self._hits += 1
            return value

    def get(self, key: Hashable) -> Optional[T]:
        """Return the cached value, or None if not found or expired."""
        value = self._lookup(key)
        return None if value is _MISSING else value

    def set(self, key: Hashable, value: T, ttl: Optional[float] = None) -> None:
        """Store ``value``, evicting the least recently used entry if full.

        Args:
            key: The cache key.
            value: The value to cache.
            ttl: Optional TTL override for this entry.
        """
        with self._lock:
            if key in self._store:
                self._store.move_to_end(key)
            elif self.max_size is not None and len(self._store) >= self.max_size:
                evicted, _ = self._store.popitem(last=False)
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": repr(evicted), "reason": "max_size"},
                )

            effective_ttl = ttl if ttl is not None else self.default_ttl_seconds
            expiry = (
                time.monotonic() + effective_ttl
                if effective_ttl is not None
                else float("inf")
            )
            self._store[key] = (value, expiry)

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Return the cached value, computing and storing it on a miss.

        The computation runs outside the lock, so two threads missing
        the same key may both compute it; the last one stored wins.
        """
        value = self._lookup(key)
        if value is not _MISSING:
            self._logger.debug("Cache hit", extra={"key": repr(key)})
            return value

        self._logger.debug("Cache miss, computing", extra={"key": repr(key)})
        computed = compute_fn()
        self.set(key, computed)
        return computed

    def clear(self) -> int:
        """Clear all entries; return how many were removed."""
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._logger.debug("Cache cleared", extra={"entries_cleared": count})
            return count

    def invalidate(self, key: Hashable) -> bool:
        """Drop one entry; return True if it existed."""
        with self._lock:
            if key in self._store:
                del self._store[key]
                return True
            return False

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counts, hit rate and size."""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }

    def keys(self) -> List[Hashable]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._store.keys())
