# src/search/suggestions.py — v1
"""Query-completion suggestions drawn from titles and tags."""

from __future__ import annotations

from typing import Iterable

from blogcore.core.models import ContentRecord

DEFAULT_SUGGESTION_LIMIT = 5


def suggestions(
    records: Iterable[ContentRecord],
    query: str,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[str]:
    """Collect up to `limit` distinct completions for a partial query.

    For each record, title words come before tags. Title words are returned
    lowercased; tags keep their original casing. The query itself is never
    suggested.
    """
    needle = query.strip().lower()
    if not needle:
        return []

    found: dict[str, None] = {}
    for record in records:
        for word in (record.title or "").lower().split():
            if needle in word and word != needle:
                found.setdefault(word)
        for tag in record.tags or []:
            tag_lower = tag.lower()
            if needle in tag_lower and tag_lower != needle:
                found.setdefault(tag)

    return list(found)[:limit]
