# src/api/facade.py — v2
"""Public API facade — the contract consumed by the presentation layer.

Usage:
    from blogcore.api.facade import SearchFacade
    facade = SearchFacade.from_settings(settings)
    response = await facade.search_page("react hooks")
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from blogcore.api.models import HighlightedResult, SearchResponse
from blogcore.config.settings import Settings
from blogcore.content.toc import extract_headings
from blogcore.core.errors import ContentNotFoundError
from blogcore.core.models import ContentRecord, Heading, SearchResult
from blogcore.logging.context import request_context
from blogcore.search.engine import search
from blogcore.search.highlight import highlight
from blogcore.search.suggestions import suggestions

if TYPE_CHECKING:
    from blogcore.cache.base_cache_store import BaseCacheStore
    from blogcore.cache.sweeper import CacheSweeper
    from blogcore.content.repository import ContentRepository

logger = logging.getLogger(__name__)


class SearchFacade:
    """Search, suggestions, highlighting and TOC over the site's content."""

    def __init__(
        self, repository: ContentRepository, settings: Settings | None = None
    ) -> None:
        self._repository = repository
        self._settings = settings or Settings()

    @classmethod
    def from_settings(
        cls, settings: Settings, cache: BaseCacheStore | None = None
    ) -> SearchFacade:
        from blogcore.content.repository import create_repository

        return cls(create_repository(settings, cache=cache), settings)

    @property
    def repository(self) -> ContentRepository:
        return self._repository

    def cache_sweeper(self) -> CacheSweeper:
        """Sweeper for the repository cache, not yet started."""
        from blogcore.cache.sweeper import CacheSweeper

        return CacheSweeper(
            self._repository.cache, interval=self._settings.cache_sweep_interval
        )

    async def search(
        self, query: str, limit: int | None = None
    ) -> list[SearchResult]:
        """Rank posts and essays against the query."""
        with request_context("search", query=query):
            records = await self._repository.all_records()
            results = search(records, query)
            logger.info(
                "Search matched %d of %d records", len(results), len(records)
            )
        return results[:limit] if limit is not None else results

    async def suggest(self, query: str) -> list[str]:
        with request_context("suggest", query=query):
            records = await self._repository.all_records()
            return suggestions(
                records, query, limit=self._settings.search_suggestion_limit
            )

    def highlight_result(self, result: SearchResult) -> HighlightedResult:
        record = result.record
        return HighlightedResult(
            id=record.id,
            kind=record.kind,
            title_html=self._highlight(record.title, result.matched_keywords),
            excerpt_html=self._highlight(record.excerpt, result.matched_keywords),
            date=record.date,
            tags=list(record.tags),
            score=result.score,
            matched_keywords=list(result.matched_keywords),
        )

    async def search_page(
        self, query: str, limit: int | None = None
    ) -> SearchResponse:
        """Search + highlighting + suggestions in one response."""
        t0 = time.perf_counter()
        matches = await self.search(query)
        results = matches[:limit] if limit is not None else matches
        hints = await self.suggest(query) if query.strip() else []
        return SearchResponse(
            query=query,
            total=len(matches),
            results=[self.highlight_result(r) for r in results],
            suggestions=hints,
            duration_ms=round((time.perf_counter() - t0) * 1000, 2),
        )

    async def table_of_contents(self, post_id: str) -> list[Heading]:
        """Headings of a post or essay body.

        Raises:
            ContentNotFoundError: If no post or essay has this id.
        """
        record = await self._find(post_id)
        return extract_headings(record.content or "")

    async def _find(self, content_id: str) -> ContentRecord:
        record = await self._repository.get_post(content_id)
        if record is None:
            record = await self._repository.get_essay(content_id)
        if record is None:
            raise ContentNotFoundError(content_id, kind="content")
        return record

    def _highlight(self, text: str, keywords: list[str]) -> str:
        return highlight(
            text,
            keywords,
            open_tag=self._settings.highlight_open_tag,
            close_tag=self._settings.highlight_close_tag,
        )
