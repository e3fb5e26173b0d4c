# src/search/engine.py — v1
"""Search & ranking over a list of content records.

Pure function of its inputs: no shared state, safe to call concurrently as
long as the caller does not mutate the record list meanwhile.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Iterable

from blogcore.core.models import ContentRecord, SearchResult
from blogcore.search.scoring import score_record, tokenize

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"\s*(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})(?!\d)")


def search(records: Iterable[ContentRecord], query: str) -> list[SearchResult]:
    """Rank records against a free-text query.

    Args:
        records: Candidate records (not modified).
        query: Raw user query.

    Returns:
        Matching records ordered by score, then number of matched keywords,
        then date (most recent first). Empty when nothing matches.
    """
    keywords = tokenize(query)
    if not keywords:
        return []

    results: list[SearchResult] = []
    for record in records:
        score, matched = score_record(record, keywords)
        if score > 0:
            results.append(
                SearchResult(record=record, score=score, matched_keywords=matched)
            )

    # reverse=True keeps the sort stable for fully tied results
    results.sort(key=_rank_key, reverse=True)

    logger.debug(
        "Search %r: %d keywords, %d results", query, len(keywords), len(results)
    )
    return results


def _rank_key(result: SearchResult) -> tuple[int, int, date]:
    return (
        result.score,
        len(result.matched_keywords),
        parse_calendar_date(result.record.date),
    )


def parse_calendar_date(value: str) -> date:
    """Parse the leading calendar date of a date string.

    Accepts ISO dates and unpadded variants such as "2024-1-5" or
    "2024/1/5". Missing or unparsable dates sort as the oldest possible date.
    """
    match = _DATE_RE.match(value or "")
    if match is None:
        return date.min
    try:
        return date(*(int(part) for part in match.groups()))
    except ValueError:
        return date.min
