# tests/unit/api/test_unit_models.py — v2
"""Tests for api/models.py."""

from __future__ import annotations

import json

from blogcore.api.models import HighlightedResult, SearchResponse


class TestSearchResponse:
    def test_defaults(self):
        response = SearchResponse(query="q", total=0)
        assert response.results == []
        assert response.suggestions == []
        assert response.duration_ms == 0.0

    def test_json_dump(self):
        hit = HighlightedResult(
            id="a", kind="post", title_html="<mark>A</mark>", excerpt_html="",
            date="2024-01-01", score=20, matched_keywords=["a"],
        )
        data = json.loads(SearchResponse(query="a", total=1, results=[hit]).model_dump_json())
        assert data["results"][0]["title_html"] == "<mark>A</mark>"
        assert data["results"][0]["tags"] == []
