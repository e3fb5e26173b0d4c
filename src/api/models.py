# src/api/models.py — v2
"""API-level models returned to the presentation layer."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HighlightedResult(BaseModel):
    """A search hit with title and excerpt already highlighted."""

    id: str
    kind: str
    title_html: str
    excerpt_html: str
    date: str
    tags: list[str] = Field(default_factory=list)
    score: int
    matched_keywords: list[str] = Field(default_factory=list)


class SearchResponse(BaseModel):
    """Return value of SearchFacade.search_page()."""

    query: str
    total: int
    results: list[HighlightedResult] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    duration_ms: float = 0.0
