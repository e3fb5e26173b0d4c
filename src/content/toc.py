# src/content/toc.py — v1
"""Table-of-contents extraction from Markdown source."""

from __future__ import annotations

import re

from blogcore.core.models import Heading

_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(.+?)[ \t]*#*[ \t]*$")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")
_NON_WORD = re.compile(r"[^\w\s-]")
_SPACES = re.compile(r"\s+")


def heading_slug(text: str) -> str:
    """Anchor id for a heading: lowercase, punctuation dropped, spaces to '-'."""
    cleaned = _NON_WORD.sub("", text.lower()).strip()
    return _SPACES.sub("-", cleaned)


def extract_headings(markdown: str) -> list[Heading]:
    """List ATX headings in document order with unique anchor ids.

    Headings inside fenced code blocks are ignored. Repeated slugs get a
    numeric suffix (``intro``, ``intro-1``, ``intro-2``).
    """
    headings: list[Heading] = []
    used: set[str] = set()
    fence: str | None = None

    for line in markdown.splitlines():
        fence_match = _FENCE_RE.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif fence == marker:
                fence = None
            continue
        if fence is not None:
            continue

        match = _HEADING_RE.match(line)
        if not match:
            continue
        text = match.group(2).strip()
        slug = _unique_slug(heading_slug(text) or "heading", used)
        headings.append(Heading(id=slug, text=text, level=len(match.group(1))))

    return headings


def _unique_slug(slug: str, used: set[str]) -> str:
    candidate = slug
    counter = 1
    while candidate in used:
        candidate = f"{slug}-{counter}"
        counter += 1
    used.add(candidate)
    return candidate
