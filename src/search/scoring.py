# src/search/scoring.py — v1
"""Query tokenization and per-record keyword scoring.

Each keyword is checked independently against title, excerpt and the
space-joined tag list (case-insensitive substring match). The field scores
add up, then the keyword weight is applied: the first keyword of the query
counts double.
"""

from __future__ import annotations

from typing import Sequence

from blogcore.core.models import ContentRecord

TITLE_WEIGHT = 10
EXCERPT_WEIGHT = 5
TAGS_WEIGHT = 3

FIELD_WEIGHTS: dict[str, int] = {
    "title": TITLE_WEIGHT,
    "excerpt": EXCERPT_WEIGHT,
    "tags": TAGS_WEIGHT,
}

PRIMARY_KEYWORD_WEIGHT = 2


def tokenize(query: str) -> list[str]:
    """Split a raw query into lowercased keywords.

    Whitespace-only input yields an empty list.
    """
    return query.strip().lower().split()


def keyword_weight(index: int) -> int:
    """Multiplier for the keyword at `index` in the query."""
    return PRIMARY_KEYWORD_WEIGHT if index == 0 else 1


def searchable_fields(record: ContentRecord) -> dict[str, str]:
    """Lowercased field texts the scorer matches against."""
    return {
        "title": (record.title or "").lower(),
        "excerpt": (record.excerpt or "").lower(),
        "tags": " ".join(record.tags or []).lower(),
    }


def score_keyword(record: ContentRecord, keyword: str) -> int:
    """Unweighted field score of one keyword against one record."""
    return _score_fields(searchable_fields(record), keyword)


def score_record(
    record: ContentRecord, keywords: Sequence[str]
) -> tuple[int, list[str]]:
    """Score a record against already-tokenized keywords.

    A repeated keyword counts once; its last occurrence sets the weight.

    Returns:
        (total score, matched keywords in first-seen order without duplicates).
    """
    fields = searchable_fields(record)
    scores: dict[str, int] = {}
    for index, keyword in enumerate(keywords):
        field_score = _score_fields(fields, keyword)
        if field_score == 0:
            continue
        scores[keyword] = field_score * keyword_weight(index)
    return sum(scores.values()), list(scores)


def _score_fields(fields: dict[str, str], keyword: str) -> int:
    return sum(
        weight for name, weight in FIELD_WEIGHTS.items() if keyword in fields[name]
    )
