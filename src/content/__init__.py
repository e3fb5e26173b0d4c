# src/content/__init__.py — v1
"""Markdown content loading, taxonomy and cached repository."""
