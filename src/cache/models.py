# src/cache/models.py — v2
"""Cache domain models: CacheEntry, CacheStats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel


@dataclass
class CacheEntry:
    """Stored value plus the bookkeeping needed for TTL expiry.

    Times are in seconds on whatever clock the owning store uses.
    """

    value: Any
    inserted_at: float
    ttl: float

    def is_expired(self, now: float) -> bool:
        """Readable iff ``now - inserted_at <= ttl``."""
        return now - self.inserted_at > self.ttl


class CacheStats(BaseModel):
    """Snapshot of cache counters."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0
