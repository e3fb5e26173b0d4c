# tests/conftest.py — v2
"""Shared test fixtures for all unit and integration tests.

Provides sample content records, a controllable clock for cache expiry,
and a temporary Markdown content tree. No network, no real sleeps.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from blogcore.cache.memory_store import MemoryCacheStore
from blogcore.config.settings import Settings
from blogcore.core.models import ContentRecord


class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# === FIXTURES: Cache ===


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_cache(clock: FakeClock) -> MemoryCacheStore:
    return MemoryCacheStore(default_ttl=300, clock=clock)


# === FIXTURES: Sample data ===


@pytest.fixture
def react_record() -> ContentRecord:
    return ContentRecord(
        id="1",
        title="React Hooks Guide",
        excerpt="Learn hooks",
        tags=["react", "hooks"],
        date="2024-01-01",
    )


@pytest.fixture
def go_record() -> ContentRecord:
    return ContentRecord(
        id="2",
        title="Intro to Go",
        excerpt="react-free backend",
        tags=["go"],
        date="2024-02-01",
    )


@pytest.fixture
def sample_records(react_record: ContentRecord, go_record: ContentRecord) -> list[ContentRecord]:
    return [react_record, go_record]


# === FIXTURES: Content tree ===

POST_POOLING = """---
title: Connection Pooling in Go
date: 2024-03-10
tags: [go, database]
author: Lin
---
# Connection Pooling

Pools keep **database** connections warm.

## Sizing

Pick a size.

## Sizing

Again.
"""

POST_HOOKS = """---
title: React Hooks Guide
date: 2024-01-05
tags:
  - react
  - hooks
excerpt: Learn hooks the practical way
---
## useState

State in function components.
"""

POST_ROOT = """No front-matter here, just a short note about `code` and [links](http://x).
"""

POST_BROKEN = """---
title: [unclosed
---
Body
"""

ESSAY_BOOK = """---
title: Notes on Refactoring
date: 2024-04-01
type: reading
tags: [books]
---
Refactoring is a habit.
"""

ESSAY_WALK = """---
title: Evening Walk
date: 2023-11-20
type: wandering
---
It rained.
"""


def write_content_tree(root: Path) -> Path:
    """Create posts/tech and posts/essays under root. Returns the posts dir."""
    posts = root / "posts"
    tech = posts / "tech"
    essays = posts / "essays"
    (tech / "backend" / "db").mkdir(parents=True)
    (tech / "frontend").mkdir(parents=True)
    essays.mkdir(parents=True)

    (tech / "backend" / "db" / "pooling.md").write_text(POST_POOLING, encoding="utf-8")
    (tech / "frontend" / "hooks.md").write_text(POST_HOOKS, encoding="utf-8")
    (tech / "note.md").write_text(POST_ROOT, encoding="utf-8")
    (tech / "broken.md").write_text(POST_BROKEN, encoding="utf-8")
    (tech / "readme.txt").write_text("ignored", encoding="utf-8")
    (essays / "refactoring.md").write_text(ESSAY_BOOK, encoding="utf-8")
    (essays / "walk.md").write_text(ESSAY_WALK, encoding="utf-8")
    return posts


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    return write_content_tree(tmp_path)


@pytest.fixture
def settings(content_root: Path) -> Settings:
    return Settings(_env_file=None, content_root=content_root)
