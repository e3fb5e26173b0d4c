# src/content/frontmatter.py — v1
"""Split a Markdown document into its YAML front-matter and body."""

from __future__ import annotations

import re
from typing import Any

import yaml

from blogcore.core.errors import FrontMatterError

_FRONT_MATTER_RE = re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


def parse_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Parse a leading ``---`` delimited YAML block.

    Args:
        text: Full file contents.

    Returns:
        (metadata, body). Without a front-matter block, metadata is empty
        and body is the whole text. YAML that is not a mapping is ignored.

    Raises:
        FrontMatterError: If the block is not valid YAML.
    """
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid front-matter: {e}") from e

    body = text[match.end():]
    if not isinstance(data, dict):
        return {}, body
    return data, body
