# src/cache/sweeper.py — v1
"""Background sweeper that periodically evicts expired cache entries.

Lazy eviction in get() already guarantees no stale value is returned; the
sweep only bounds memory held by keys that are never read again.
"""

from __future__ import annotations

import logging
import threading

from blogcore.cache.base_cache_store import BaseCacheStore

logger = logging.getLogger(__name__)


class CacheSweeper:
    """Run store.cleanup() every `interval` seconds on a daemon thread."""

    def __init__(self, store: BaseCacheStore, interval: float = 60.0) -> None:
        if interval <= 0:
            raise ValueError("interval must be > 0")
        self._store = store
        self._interval = interval
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()
        self._lock = threading.Lock()
        self._sweeps = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def sweeps(self) -> int:
        """Number of completed sweeps."""
        return self._sweeps

    def start(self) -> None:
        with self._lock:
            if self.running:
                logger.warning("Cache sweeper is already running")
                return
            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._loop, name="CacheSweeper", daemon=True
            )
            self._thread.start()
        logger.info("Started cache sweeper (interval: %ss)", self._interval)

    def stop(self, timeout: float = 5.0) -> None:
        with self._lock:
            if not self.running:
                logger.warning("Cache sweeper is not running")
                return
            self._stop_event.set()
            self._thread.join(timeout=timeout)
            self._thread = None
        logger.info("Stopped cache sweeper after %d sweeps", self._sweeps)

    def run_once(self) -> int:
        """Perform a single sweep now. Returns entries evicted."""
        evicted = self._store.cleanup()
        self._sweeps += 1
        return evicted

    def _loop(self) -> None:
        while not self._stop_event.wait(self._interval):
            try:
                self.run_once()
            except Exception:
                logger.exception("Cache sweep failed")

    def __enter__(self) -> CacheSweeper:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.running:
            self.stop()
