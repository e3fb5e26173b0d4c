# src/cache/base_cache_store.py — v2
"""Abstract cache store interface.

Stores are in-memory accelerators, never a source of truth: a miss or a
cleared store only costs a reload from the content files.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from blogcore.cache.models import CacheStats

T = TypeVar("T")


class BaseCacheStore(ABC):
    """Unified interface for key/value cache backends with per-entry TTL."""

    @abstractmethod
    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Store value under key, overwriting any existing entry.

        A missing or zero ttl uses the store default.
        """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the fresh value for key, or None. Evicts a stale entry."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries."""

    @abstractmethod
    def cleanup(self) -> int:
        """Evict every expired entry. Returns the number evicted."""

    @abstractmethod
    def stats(self) -> CacheStats:
        """Counters snapshot."""

    def has(self, key: str) -> bool:
        """True iff get(key) would return a value."""
        return self.get(key) is not None

    def get_or_set(
        self, key: str, factory: Callable[[], T], ttl: float | None = None
    ) -> T:
        """Return the cached value or compute, store and return it."""
        value = self.get(key)
        if value is not None:
            return value
        value = factory()
        self.set(key, value, ttl)
        return value
