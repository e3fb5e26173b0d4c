# tests/unit/logging/test_unit_handlers.py — v2
"""Tests for logging/handlers.py."""

from __future__ import annotations

import pytest

from blogcore.logging.handlers import create_rotating_handler, parse_size


class TestParseSize:
    @pytest.mark.parametrize(
        "text,expected",
        [("512B", 512), ("1KB", 1024), ("10MB", 10 * 1024**2), ("2 gb", 2 * 1024**3)],
    )
    def test_valid(self, text, expected):
        assert parse_size(text) == expected

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid size"):
            parse_size("ten megs")


class TestCreateRotatingHandler:
    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "a" / "b" / "app.log"
        handler = create_rotating_handler(path, rotation="1KB", retention=3)
        try:
            assert path.parent.is_dir()
            assert handler.maxBytes == 1024
            assert handler.backupCount == 3
        finally:
            handler.close()
