# src/content/essay_loader.py — v1
"""Loader for essays: flat directory, one Markdown file per essay."""

from __future__ import annotations

import logging
from typing import Any

from blogcore.content.base_loader import MARKDOWN_SUFFIX, BaseContentLoader, ContentFile
from blogcore.content.categories import get_essay_type
from blogcore.content.markdown_text import make_excerpt, reading_time_chars
from blogcore.core.models import ContentRecord

logger = logging.getLogger(__name__)

ESSAY_CATEGORY = "essays"


class EssayLoader(BaseContentLoader):
    """Essays are not nested; the file stem is the id."""

    def __init__(self, root, excerpt_length: int = 200) -> None:
        super().__init__(root)
        self._excerpt_length = excerpt_length

    def discover(self) -> list[ContentFile]:
        if not self._root.is_dir():
            return []
        return [
            ContentFile(
                path=path,
                id=path.stem,
                category=ESSAY_CATEGORY,
                mtime=path.stat().st_mtime,
            )
            for path in sorted(self._root.glob(f"*{MARKDOWN_SUFFIX}"))
            if path.is_file()
        ]

    def build_record(
        self,
        file: ContentFile,
        metadata: dict[str, Any],
        body: str,
        include_body: bool,
    ) -> ContentRecord:
        essay_type = metadata.get("type")
        if essay_type is not None and get_essay_type(str(essay_type)) is None:
            logger.warning("Unknown essay type %r in %s", essay_type, file.path)
            essay_type = None

        return ContentRecord(
            id=file.id,
            title=metadata.get("title"),
            date=metadata.get("date"),
            excerpt=metadata.get("excerpt") or make_excerpt(body, self._excerpt_length),
            tags=metadata.get("tags"),
            author=metadata.get("author"),
            category=ESSAY_CATEGORY,
            essay_type=essay_type,
            reading_time=reading_time_chars(body),
            content=body if include_body else None,
            source_path=str(file.path),
            kind="essay",
        )
