# tests/unit/cache/test_unit_null_store.py — v1
"""Tests for cache/null_store.py."""

from __future__ import annotations

from blogcore.cache.null_store import NullCacheStore


class TestNullCacheStore:
    def test_always_miss(self):
        store = NullCacheStore()
        store.set("k", "v")
        assert store.get("k") is None
        assert store.has("k") is False

    def test_cleanup_and_clear_noop(self):
        store = NullCacheStore()
        store.clear()
        assert store.cleanup() == 0

    def test_get_or_set_always_calls_factory(self):
        store = NullCacheStore()
        calls = []
        store.get_or_set("k", lambda: calls.append(1) or "x")
        store.get_or_set("k", lambda: calls.append(1) or "x")
        assert len(calls) == 2

    def test_stats_count_misses(self):
        store = NullCacheStore()
        store.get("a")
        store.get("b")
        assert store.stats().misses == 2
