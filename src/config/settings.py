# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for all deployment-specific settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Content ===
    content_root: Path = Path("posts")
    posts_subdir: str = "tech"
    essays_subdir: str = "essays"
    excerpt_length: int = 200
    default_author: str = "Anonymous"

    # === Cache (TTLs in seconds) ===
    cache_enabled: bool = True
    cache_backend: Literal["memory"] = "memory"
    cache_default_ttl: float = 300
    cache_ttl_file_list: float = 600
    cache_ttl_post: float = 1800
    cache_ttl_post_list: float = 300
    cache_ttl_post_content: float = 900
    cache_ttl_categories: float = 600
    cache_sweep_interval: float = 60

    # === Search ===
    search_suggestion_limit: int = 5
    highlight_open_tag: str = '<mark class="bg-yellow-200 px-1 rounded">'
    highlight_close_tag: str = "</mark>"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate numeric ranges and cross-field rules."""
        errors: list[str] = []

        ttl_fields = [
            "cache_default_ttl",
            "cache_ttl_file_list",
            "cache_ttl_post",
            "cache_ttl_post_list",
            "cache_ttl_post_content",
            "cache_ttl_categories",
            "cache_sweep_interval",
        ]
        for name in ttl_fields:
            if getattr(self, name) <= 0:
                errors.append(f"{name.upper()} must be > 0")

        if self.excerpt_length <= 0:
            errors.append("EXCERPT_LENGTH must be > 0")

        if self.search_suggestion_limit < 1:
            errors.append("SEARCH_SUGGESTION_LIMIT must be >= 1")

        if self.posts_subdir and self.posts_subdir == self.essays_subdir:
            errors.append("POSTS_SUBDIR and ESSAYS_SUBDIR must differ")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def posts_dir(self) -> Path:
        """Directory scanned recursively for tech posts."""
        return self.content_root.expanduser() / self.posts_subdir

    @property
    def essays_dir(self) -> Path:
        """Directory scanned for essays."""
        return self.content_root.expanduser() / self.essays_subdir


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or CLI flags).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
