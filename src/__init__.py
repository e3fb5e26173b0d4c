# src/__init__.py — v1
"""blogcore — content loading, caching and search for a Markdown blog."""

from blogcore.version import __version__

__all__ = ["__version__"]
