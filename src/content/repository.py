# src/content/repository.py — v1
"""Cached access to posts, essays and categories.

Every expensive step (directory scan, per-file parse, sorted list, full post
with body) is memoized in the injected cache store with its own TTL. The
cache is never the source of truth: with a NullCacheStore every call simply
re-reads the files.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blogcore.content.base_loader import BaseContentLoader, ContentFile, sort_by_date
from blogcore.content.categories import CATEGORIES
from blogcore.core.models import Category, ContentRecord, EssayTypeId

if TYPE_CHECKING:
    from blogcore.cache.base_cache_store import BaseCacheStore
    from blogcore.config.settings import Settings

logger = logging.getLogger(__name__)

FILE_LIST_KEY = "markdown-files-list"
POST_LIST_KEY = "sorted-posts-data"
ESSAY_LIST_KEY = "sorted-essays-data"
CATEGORIES_KEY = "tech-categories"


class ContentRepository:
    """Read-side access to site content backed by a TTL cache."""

    def __init__(
        self,
        post_loader: BaseContentLoader,
        essay_loader: BaseContentLoader,
        cache: BaseCacheStore,
        settings: Settings,
    ) -> None:
        self._posts = post_loader
        self._essays = essay_loader
        self._cache = cache
        self._settings = settings

    @property
    def cache(self) -> BaseCacheStore:
        return self._cache

    # --- Posts ---

    async def list_posts(self) -> list[ContentRecord]:
        """All posts, newest first, without bodies."""
        cached = self._cache.get(POST_LIST_KEY)
        if cached is not None:
            return cached

        records: list[ContentRecord] = []
        for file in self._list_post_files():
            record = self._parse_post(file)
            if record is not None:
                records.append(record)
        records = sort_by_date(records)

        self._cache.set(POST_LIST_KEY, records, self._settings.cache_ttl_post_list)
        return records

    async def get_post(self, post_id: str) -> ContentRecord | None:
        """Single post including its Markdown body."""
        key = f"post-content-{post_id}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        file = next((f for f in self._list_post_files() if f.id == post_id), None)
        if file is None:
            logger.debug("Post %s not found", post_id)
            return None

        record = self._posts.parse(file, include_body=True)
        if record is not None:
            self._cache.set(key, record, self._settings.cache_ttl_post_content)
        return record

    async def posts_by_category(self, category: str) -> list[ContentRecord]:
        return [p for p in await self.list_posts() if p.category == category]

    # --- Essays ---

    async def list_essays(self) -> list[ContentRecord]:
        """All essays, newest first, without bodies."""
        cached = self._cache.get(ESSAY_LIST_KEY)
        if cached is not None:
            return cached

        essays = await self._essays.load()
        self._cache.set(ESSAY_LIST_KEY, essays, self._settings.cache_ttl_post_list)
        return essays

    async def get_essay(self, essay_id: str) -> ContentRecord | None:
        key = f"essay-content-{essay_id}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        essay = await self._essays.load_one(essay_id, include_body=True)
        if essay is not None:
            self._cache.set(key, essay, self._settings.cache_ttl_post_content)
        return essay

    async def essays_by_type(self, essay_type: EssayTypeId) -> list[ContentRecord]:
        return [e for e in await self.list_essays() if e.essay_type == essay_type]

    # --- Site-wide ---

    async def all_records(self) -> list[ContentRecord]:
        """Posts and essays together, newest first (the search corpus)."""
        return sort_by_date(await self.list_posts() + await self.list_essays())

    def categories(self) -> list[Category]:
        return self._cache.get_or_set(
            CATEGORIES_KEY, lambda: list(CATEGORIES), self._settings.cache_ttl_categories
        )

    def invalidate(self) -> None:
        """Drop everything cached so the next call re-reads the files."""
        self._cache.clear()
        logger.info("Content cache invalidated")

    # --- Internals ---

    def _list_post_files(self) -> list[ContentFile]:
        """Directory scan, reused while the root directory mtime is unchanged."""
        root_mtime = self._posts.root_mtime()
        cached = self._cache.get(FILE_LIST_KEY)
        if cached is not None and cached[1] == root_mtime:
            return cached[0]

        files = self._posts.discover()
        self._cache.set(
            FILE_LIST_KEY, (files, root_mtime), self._settings.cache_ttl_file_list
        )
        logger.debug("Scanned %d post files under %s", len(files), self._posts.root)
        return files

    def _parse_post(self, file: ContentFile) -> ContentRecord | None:
        key = f"post-{file.id}-{file.mtime}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        record = self._posts.parse(file)
        if record is not None:
            self._cache.set(key, record, self._settings.cache_ttl_post)
        return record


def create_repository(
    settings: Settings, cache: BaseCacheStore | None = None
) -> ContentRepository:
    """Wire loaders and cache from settings."""
    from blogcore.cache.cache_factory import create_cache_store
    from blogcore.content.essay_loader import EssayLoader
    from blogcore.content.post_loader import PostLoader

    return ContentRepository(
        post_loader=PostLoader(
            settings.posts_dir,
            excerpt_length=settings.excerpt_length,
            default_author=settings.default_author,
        ),
        essay_loader=EssayLoader(
            settings.essays_dir, excerpt_length=settings.excerpt_length
        ),
        cache=cache if cache is not None else create_cache_store(settings),
        settings=settings,
    )
