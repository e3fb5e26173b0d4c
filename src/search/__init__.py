# src/search/__init__.py — v1
"""Keyword search, highlighting and suggestions over content records."""

from blogcore.search.engine import search
from blogcore.search.highlight import highlight
from blogcore.search.scoring import keyword_weight, tokenize
from blogcore.search.suggestions import suggestions

__all__ = ["highlight", "keyword_weight", "search", "suggestions", "tokenize"]
