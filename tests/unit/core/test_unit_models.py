# tests/unit/core/test_unit_models.py — v2
"""Tests for core/models.py — record normalization and result models."""

from __future__ import annotations

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from blogcore.core.errors import BlogcoreError, ContentNotFoundError
from blogcore.core.models import ContentRecord, Heading, SearchResult


class TestContentRecord:
    def test_minimal(self):
        r = ContentRecord(id="x")
        assert r.title == ""
        assert r.excerpt == ""
        assert r.tags == []
        assert r.date == ""
        assert r.kind == "post"

    def test_none_fields_default_to_empty(self):
        r = ContentRecord(id="x", title=None, excerpt=None, tags=None, date=None)
        assert (r.title, r.excerpt, r.tags, r.date) == ("", "", [], "")

    def test_scalar_tag_wrapped(self):
        assert ContentRecord(id="x", tags="solo").tags == ["solo"]

    def test_numeric_title(self):
        assert ContentRecord(id="x", title=2024).title == "2024"

    def test_date_objects_to_iso(self):
        assert ContentRecord(id="x", date=date(2024, 1, 2)).date == "2024-01-02"
        assert ContentRecord(id="x", date=datetime(2024, 1, 2, 3, 4)).date.startswith(
            "2024-01-02T03:04"
        )

    def test_frozen(self):
        r = ContentRecord(id="x")
        with pytest.raises(ValidationError):
            r.title = "changed"  # type: ignore[misc]

    def test_invalid_essay_type(self):
        with pytest.raises(ValidationError):
            ContentRecord(id="x", essay_type="poetry")


class TestSearchResult:
    def test_id_property(self):
        res = SearchResult(record=ContentRecord(id="r1"), score=3, matched_keywords=["a"])
        assert res.id == "r1"

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError):
            SearchResult(record=ContentRecord(id="r1"), score=-1)


class TestHeading:
    def test_level_bounds(self):
        with pytest.raises(ValidationError):
            Heading(id="h", text="t", level=7)


class TestErrors:
    def test_not_found_message(self):
        err = ContentNotFoundError("abc")
        assert isinstance(err, BlogcoreError)
        assert "abc" in str(err)
        assert err.kind == "post"
