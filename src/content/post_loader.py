# src/content/post_loader.py — v1
"""Loader for tech posts: recursive Markdown scan, category from first folder."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from blogcore.content.base_loader import MARKDOWN_SUFFIX, BaseContentLoader, ContentFile
from blogcore.content.markdown_text import clean_markdown_text, make_excerpt, reading_time_words
from blogcore.core.models import ContentRecord

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "general"
DEFAULT_TITLE = "Untitled"


class PostLoader(BaseContentLoader):
    """Posts live anywhere under the root; ``backend/db/pool.md`` gets
    id ``backend-db-pool`` and category ``backend``.
    """

    def __init__(
        self,
        root: Path | str,
        excerpt_length: int = 200,
        default_author: str = "Anonymous",
    ) -> None:
        super().__init__(root)
        self._excerpt_length = excerpt_length
        self._default_author = default_author

    def discover(self) -> list[ContentFile]:
        if not self._root.is_dir():
            logger.debug("Posts directory %s does not exist", self._root)
            return []

        files: list[ContentFile] = []
        for path in sorted(self._root.rglob(f"*{MARKDOWN_SUFFIX}")):
            if not path.is_file():
                continue
            relative = path.relative_to(self._root)
            parts = relative.with_suffix("").parts
            files.append(
                ContentFile(
                    path=path,
                    id="-".join(parts),
                    category=parts[0] if len(parts) > 1 else DEFAULT_CATEGORY,
                    mtime=path.stat().st_mtime,
                )
            )
        return files

    def build_record(
        self,
        file: ContentFile,
        metadata: dict[str, Any],
        body: str,
        include_body: bool,
    ) -> ContentRecord:
        clean = clean_markdown_text(body)
        return ContentRecord(
            id=file.id,
            title=metadata.get("title") or DEFAULT_TITLE,
            date=metadata.get("date") or datetime.now(timezone.utc).isoformat(),
            excerpt=metadata.get("excerpt") or make_excerpt(clean, self._excerpt_length),
            tags=metadata.get("tags") or [],
            author=metadata.get("author") or self._default_author,
            category=metadata.get("category") or file.category,
            reading_time=reading_time_words(clean),
            content=body if include_body else None,
            source_path=str(file.path),
            kind="post",
        )
