"""LRU cache of rendered images keyed by (selection, settings_hash, region)."""

from __future__ import annotations

from collections import OrderedDict
from typing import Generic, TypeVar

T = TypeVar("T")

CacheKey = tuple[int, str, int, int]


class GridCache(Generic[T]):
    """Simple LRU cache for rendered grids.

    A ``max_size`` of 0 disables caching: ``put`` is a no-op and ``get``
    always misses.
    """

    def __init__(self, max_size: int = 32) -> None:
        if max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {max_size}")
        self._max_size = max_size
        self._cache: OrderedDict[CacheKey, T] = OrderedDict()

    @staticmethod
    def key(index: int, settings_hash: str, columns: int, rows: int) -> CacheKey:
        return (index, settings_hash, columns, rows)

    def get(self, key: CacheKey) -> T | None:
        """Get a cached value, or None if not present."""
        if key in self._cache:
            self._cache.move_to_end(key)
            return self._cache[key]
        return None

    def put(self, key: CacheKey, value: T) -> None:
        if self._max_size == 0:
            return
        if key in self._cache:
            self._cache.move_to_end(key)
        elif len(self._cache) >= self._max_size:
            self._cache.popitem(last=False)
        self._cache[key] = value

    def clear(self) -> None:
        self._cache.clear()

    @property
    def enabled(self) -> bool:
        return self._max_size > 0

    @property
    def size(self) -> int:
        return len(self._cache)
