# tests/unit/cache/test_models.py — v2
"""Tests for cache/models.py — CacheEntry expiry and CacheStats."""

from __future__ import annotations

from blogcore.cache.models import CacheEntry, CacheStats


class TestCacheEntry:
    def test_fresh_within_ttl(self):
        entry = CacheEntry(value="v", inserted_at=100.0, ttl=10.0)
        assert entry.is_expired(105.0) is False

    def test_boundary_is_still_readable(self):
        entry = CacheEntry(value="v", inserted_at=100.0, ttl=10.0)
        assert entry.is_expired(110.0) is False

    def test_expired_after_ttl(self):
        entry = CacheEntry(value="v", inserted_at=100.0, ttl=10.0)
        assert entry.is_expired(110.5) is True


class TestCacheStats:
    def test_defaults(self):
        s = CacheStats()
        assert s.hits == 0
        assert s.hit_rate == 0.0

    def test_hit_rate(self):
        s = CacheStats(hits=3, misses=1)
        assert s.hit_rate == 0.75
