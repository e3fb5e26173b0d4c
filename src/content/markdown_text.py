# src/content/markdown_text.py — v1
"""Plain-text helpers for Markdown bodies: cleanup, excerpts, reading time."""

from __future__ import annotations

import math
import re

# Order matters: code is dropped before inline markup is unwrapped.
_CLEANUP_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"```[\s\S]*?```"), " "),
    (re.compile(r"`([^`]+)`"), " "),
    (re.compile(r"<[^>]*>"), " "),
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),
    (re.compile(r"\*\*([^*]+)\*\*"), r"\1"),
    (re.compile(r"\*([^*]+)\*"), r"\1"),
    (re.compile(r"!\[([^\]]*)\]\([^)]+\)"), ""),
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),
    (re.compile(r"^\s*[-*+]\s+", re.MULTILINE), ""),
    (re.compile(r"^\s*\d+\.\s+", re.MULTILINE), ""),
    (re.compile(r"^>\s+", re.MULTILINE), ""),
    (re.compile(r"\s+"), " "),
]


def clean_markdown_text(text: str) -> str:
    """Strip Markdown syntax and collapse whitespace into single spaces."""
    for pattern, repl in _CLEANUP_RULES:
        text = pattern.sub(repl, text)
    return text.strip()


def make_excerpt(text: str, length: int = 200) -> str:
    """First `length` characters of the cleaned text, with '...' if cut."""
    clean = clean_markdown_text(text)
    if len(clean) <= length:
        return clean
    return clean[:length] + "..."


def reading_time_words(text: str, words_per_minute: int = 250) -> int:
    """Minutes to read, by word count. Never less than 1 for non-empty text."""
    words = len(text.split())
    return math.ceil(words / words_per_minute)


def reading_time_chars(text: str, chars_per_minute: int = 200) -> int:
    """Minutes to read, by character count (suits CJK essays)."""
    return math.ceil(len(text) / chars_per_minute)
