# src/cache/null_store.py — v1
"""Always-miss cache store used when CACHE_ENABLED=false."""

from __future__ import annotations

from typing import Any

from blogcore.cache.base_cache_store import BaseCacheStore
from blogcore.cache.models import CacheStats


class NullCacheStore(BaseCacheStore):
    """Stores nothing. Every get() is a miss."""

    def __init__(self) -> None:
        self._misses = 0

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        return None

    def get(self, key: str) -> Any | None:
        self._misses += 1
        return None

    def clear(self) -> None:
        return None

    def cleanup(self) -> int:
        return 0

    def stats(self) -> CacheStats:
        return CacheStats(misses=self._misses)
