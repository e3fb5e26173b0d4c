# tests/unit/api/test_unit_facade.py — v2
"""Tests for api/facade.py — search, suggestions, highlighting and TOC."""

from __future__ import annotations

import pytest

from blogcore.api.facade import SearchFacade
from blogcore.api.models import SearchResponse
from blogcore.cache.null_store import NullCacheStore
from blogcore.cache.sweeper import CacheSweeper
from blogcore.core.errors import ContentNotFoundError
from blogcore.core.models import ContentRecord, SearchResult


@pytest.fixture
def facade(settings, memory_cache) -> SearchFacade:
    return SearchFacade.from_settings(settings, cache=memory_cache)


class TestSearch:
    @pytest.mark.asyncio
    async def test_ranks_posts_and_essays(self, facade):
        results = await facade.search("react")
        assert [r.id for r in results] == ["frontend-hooks"]
        assert results[0].score == 26

    @pytest.mark.asyncio
    async def test_finds_essays(self, facade):
        results = await facade.search("refactoring")
        assert [r.id for r in results] == ["refactoring"]
        assert results[0].record.kind == "essay"

    @pytest.mark.asyncio
    async def test_empty_query(self, facade):
        assert await facade.search("   ") == []

    @pytest.mark.asyncio
    async def test_limit(self, facade):
        results = await facade.search("o", limit=2)
        assert len(results) == 2

    @pytest.mark.asyncio
    async def test_without_cache(self, settings):
        facade = SearchFacade.from_settings(settings, cache=NullCacheStore())
        assert [r.id for r in await facade.search("go")] == ["backend-db-pooling"]


class TestSuggest:
    @pytest.mark.asyncio
    async def test_title_words_then_tags(self, facade):
        assert await facade.suggest("re") == ["refactoring", "react"]

    @pytest.mark.asyncio
    async def test_deduplicated(self, facade):
        assert await facade.suggest("ho") == ["hooks"]

    @pytest.mark.asyncio
    async def test_blank(self, facade):
        assert await facade.suggest("") == []


class TestHighlightResult:
    def test_marks_title_and_excerpt(self, settings):
        facade = SearchFacade.from_settings(settings, cache=NullCacheStore())
        record = ContentRecord(id="a", title="Go tips", excerpt="go fast", tags=["go"])
        hit = facade.highlight_result(
            SearchResult(record=record, score=26, matched_keywords=["go"])
        )
        open_tag = settings.highlight_open_tag
        assert hit.title_html == f"{open_tag}Go</mark> tips"
        assert hit.excerpt_html == f"{open_tag}go</mark> fast"
        assert hit.tags == ["go"]
        assert hit.score == 26

    def test_custom_tags(self, content_root):
        from blogcore.config.settings import Settings

        settings = Settings(
            _env_file=None,
            content_root=content_root,
            highlight_open_tag="<b>",
            highlight_close_tag="</b>",
        )
        facade = SearchFacade.from_settings(settings, cache=NullCacheStore())
        record = ContentRecord(id="a", title="Go tips")
        hit = facade.highlight_result(
            SearchResult(record=record, score=20, matched_keywords=["go"])
        )
        assert hit.title_html == "<b>Go</b> tips"


class TestSearchPage:
    @pytest.mark.asyncio
    async def test_response(self, facade):
        response = await facade.search_page("hook")
        assert isinstance(response, SearchResponse)
        assert response.total == 1
        assert response.results[0].id == "frontend-hooks"
        assert "<mark" in response.results[0].title_html
        assert response.suggestions == ["hooks"]
        assert response.duration_ms >= 0

    @pytest.mark.asyncio
    async def test_total_counts_matches_before_limit(self, facade):
        response = await facade.search_page("o", limit=1)
        assert len(response.results) == 1
        assert response.total == len(await facade.search("o"))
        assert response.total > 1

    @pytest.mark.asyncio
    async def test_no_match(self, facade):
        response = await facade.search_page("kubernetes")
        assert response.total == 0
        assert response.results == []
        assert response.suggestions == []


class TestTableOfContents:
    @pytest.mark.asyncio
    async def test_post_headings(self, facade):
        headings = await facade.table_of_contents("backend-db-pooling")
        assert [(h.id, h.level) for h in headings] == [
            ("connection-pooling", 1),
            ("sizing", 2),
            ("sizing-1", 2),
        ]

    @pytest.mark.asyncio
    async def test_essay_without_headings(self, facade):
        assert await facade.table_of_contents("walk") == []

    @pytest.mark.asyncio
    async def test_missing(self, facade):
        with pytest.raises(ContentNotFoundError, match="nope") as exc_info:
            await facade.table_of_contents("nope")
        assert str(exc_info.value).startswith("Content with id")
        assert exc_info.value.kind == "content"


class TestCacheSweeper:
    def test_not_started(self, facade, settings):
        sweeper = facade.cache_sweeper()
        assert isinstance(sweeper, CacheSweeper)
        assert sweeper.running is False
