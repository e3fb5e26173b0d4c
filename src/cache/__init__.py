# src/cache/__init__.py — v1
"""In-memory TTL cache stores."""
