# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

No module redefines these types — all imports come from core.models.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ContentKind = Literal["post", "essay"]
EssayTypeId = Literal["reading", "thoughts", "life"]


# === CONTENT ===


class ContentRecord(BaseModel):
    """A single publishable piece of content (post or essay).

    Produced by the loaders and treated as read-only by the search engine.
    Missing text fields default to empty values instead of failing.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    excerpt: str = ""
    tags: list[str] = Field(default_factory=list)
    date: str = ""

    # Loader supplements
    kind: ContentKind = "post"
    author: str | None = None
    category: str | None = None
    essay_type: EssayTypeId | None = None
    reading_time: int | None = None
    content: str | None = None
    source_path: str | None = None

    @field_validator("title", "excerpt", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        if isinstance(v, (list, tuple)):
            return [str(t) for t in v if t is not None]
        return v

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_iso(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, (date, datetime)):
            return v.isoformat()
        return v


class SearchResult(BaseModel):
    """A content record ranked against a query."""

    record: ContentRecord
    score: int = Field(ge=0)
    matched_keywords: list[str] = Field(default_factory=list)

    @property
    def id(self) -> str:
        return self.record.id


# === TAXONOMY ===


class Category(BaseModel):
    """Tech post category shown on the categories page."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    color: str


class EssayType(BaseModel):
    """Essay flavour (reading notes, thoughts, life)."""

    model_config = ConfigDict(frozen=True)

    id: EssayTypeId
    name: str
    description: str
    color: str


# === TABLE OF CONTENTS ===


class Heading(BaseModel):
    """One entry of a post's table of contents."""

    id: str
    text: str
    level: int = Field(ge=1, le=6)
