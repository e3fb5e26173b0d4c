# src/cache/memory_store.py — v1
"""Process-local TTL cache (default CACHE_BACKEND=memory).

Entries expire lazily on read; CacheSweeper may call cleanup() periodically
to reclaim keys that are never read again.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable

from blogcore.cache.base_cache_store import BaseCacheStore
from blogcore.cache.models import CacheEntry, CacheStats

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

DEFAULT_TTL_SECONDS = 5 * 60


class MemoryCacheStore(BaseCacheStore):
    """Thread-safe dict-backed cache with per-entry TTL.

    Args:
        default_ttl: TTL in seconds used when set() is called without one.
        clock: Monotonic time source in seconds. Injectable for tests.
    """

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL_SECONDS,
        clock: Clock | None = None,
    ) -> None:
        self._default_ttl = default_ttl
        self._clock: Clock = clock or time.monotonic
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def default_ttl(self) -> float:
        return self._default_ttl

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        entry = CacheEntry(
            value=value,
            inserted_at=self._clock(),
            ttl=ttl if ttl else self._default_ttl,
        )
        with self._lock:
            self._entries[key] = entry

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            if entry.is_expired(self._clock()):
                del self._entries[key]
                self._misses += 1
                self._evictions += 1
                logger.debug("Evicted stale cache entry %s", key)
                return None
            self._hits += 1
            return entry.value

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.debug("Cleared %d cache entries", count)

    def cleanup(self) -> int:
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if e.is_expired(now)]
            for key in expired:
                del self._entries[key]
            self._evictions += len(expired)
        if expired:
            logger.debug("Cache sweep evicted %d entries", len(expired))
        return len(expired)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                size=len(self._entries),
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
