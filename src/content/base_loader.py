# src/content/base_loader.py — v1
"""Abstract loader turning Markdown files on disk into ContentRecords."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from blogcore.content.frontmatter import parse_front_matter
from blogcore.core.errors import ContentError
from blogcore.core.models import ContentRecord
from blogcore.search.engine import parse_calendar_date

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


@dataclass(frozen=True)
class ContentFile:
    """A Markdown file discovered under a loader root."""

    path: Path
    id: str
    category: str
    mtime: float


class BaseContentLoader(ABC):
    """Unified interface for content loaders.

    Subclasses decide which files belong to them (discover) and how
    front-matter maps onto a record (build_record).
    """

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root).expanduser()

    @property
    def root(self) -> Path:
        return self._root

    @abstractmethod
    def discover(self) -> list[ContentFile]:
        """List content files under the root. Missing root yields []."""

    @abstractmethod
    def build_record(
        self,
        file: ContentFile,
        metadata: dict[str, Any],
        body: str,
        include_body: bool,
    ) -> ContentRecord:
        """Map parsed front-matter and body onto a ContentRecord."""

    def root_mtime(self) -> float:
        """Modification time of the root directory, 0.0 if it is missing."""
        try:
            return self._root.stat().st_mtime
        except OSError:
            return 0.0

    def read(self, file: ContentFile) -> tuple[dict[str, Any], str]:
        """Read a file and split its front-matter from the body.

        Raises:
            ContentError: If the file cannot be read or decoded.
        """
        try:
            text = file.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentError(f"Cannot read {file.path}: {e}") from e
        return parse_front_matter(text)

    def parse(
        self, file: ContentFile, include_body: bool = False
    ) -> ContentRecord | None:
        """Parse one file. Unreadable or malformed files are logged and skipped."""
        try:
            metadata, body = self.read(file)
            return self.build_record(file, metadata, body, include_body)
        except ContentError as e:
            logger.warning("Skipping %s: %s", file.path, e)
        except ValidationError as e:
            logger.warning(
                "Skipping %s: invalid front-matter (%d errors)",
                file.path, e.error_count(),
            )
        return None

    def find(self, content_id: str) -> ContentFile | None:
        return next((f for f in self.discover() if f.id == content_id), None)

    async def load(self) -> list[ContentRecord]:
        """Parse every discovered file, newest first."""
        files = self.discover()
        records = [r for r in (self.parse(f) for f in files) if r is not None]
        logger.info(
            "Loaded %d/%d records from %s", len(records), len(files), self._root
        )
        return sort_by_date(records)

    async def load_one(
        self, content_id: str, include_body: bool = True
    ) -> ContentRecord | None:
        """Parse a single record by id. None if unknown or unreadable."""
        file = self.find(content_id)
        if file is None:
            return None
        return self.parse(file, include_body=include_body)


def sort_by_date(records: list[ContentRecord]) -> list[ContentRecord]:
    """Newest first by calendar date; same-day records by full timestamp."""
    return sorted(
        records, key=lambda r: (parse_calendar_date(r.date), r.date), reverse=True
    )
