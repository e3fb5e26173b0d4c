# src/cache/cache_factory.py — v3
"""Factory for cache store instantiation."""

from __future__ import annotations

from typing import Callable

from blogcore.cache.base_cache_store import BaseCacheStore
from blogcore.config.settings import Settings


def create_cache_store(
    settings: Settings | None = None,
    clock: Callable[[], float] | None = None,
) -> BaseCacheStore:
    """Instantiate the configured cache backend.

    Args:
        settings: Application settings. Defaults to an enabled memory cache.
        clock: Optional time source forwarded to the memory store.

    Returns:
        Configured BaseCacheStore implementation.
    """
    if settings is not None and not settings.cache_enabled:
        from blogcore.cache.null_store import NullCacheStore
        return NullCacheStore()

    backend = "memory" if settings is None else settings.cache_backend

    if backend == "memory":
        from blogcore.cache.memory_store import DEFAULT_TTL_SECONDS, MemoryCacheStore
        default_ttl = (
            DEFAULT_TTL_SECONDS if settings is None else settings.cache_default_ttl
        )
        return MemoryCacheStore(default_ttl=default_ttl, clock=clock)

    raise ValueError(f"Unsupported cache backend: {backend!r}")
