# src/core/errors.py — v1
"""Exception hierarchy for blogcore.

Empty results (empty query, cache miss, no match) are never errors; these
types only cover content that cannot be read or does not exist.
"""

from __future__ import annotations


class BlogcoreError(Exception):
    """Base class for all blogcore errors."""


class ContentError(BlogcoreError):
    """A content file could not be read or parsed."""


class FrontMatterError(ContentError):
    """The YAML front-matter block of a Markdown file is invalid."""


class ContentNotFoundError(BlogcoreError):
    """No content record exists for the requested id."""

    def __init__(self, content_id: str, kind: str = "post") -> None:
        self.content_id = content_id
        self.kind = kind
        super().__init__(f"{kind.capitalize()} with id {content_id!r} not found")
