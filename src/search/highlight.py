# src/search/highlight.py — v1
"""Wrap keyword occurrences in highlight markers.

Keywords are applied one after another; text already wrapped by an earlier
pass is not protected, so the output is not idempotent.
"""

from __future__ import annotations

import re
from typing import Sequence

DEFAULT_OPEN_TAG = '<mark class="bg-yellow-200 px-1 rounded">'
DEFAULT_CLOSE_TAG = "</mark>"


def highlight(
    text: str,
    keywords: Sequence[str],
    open_tag: str = DEFAULT_OPEN_TAG,
    close_tag: str = DEFAULT_CLOSE_TAG,
) -> str:
    """Return text with every case-insensitive keyword match wrapped.

    Regex metacharacters in keywords are matched literally and the
    original casing of the matched text is preserved.
    """
    if not text or not keywords:
        return text

    highlighted = text
    for keyword in keywords:
        if not keyword:
            continue
        pattern = re.compile(re.escape(keyword), re.IGNORECASE)
        highlighted = pattern.sub(
            lambda m: f"{open_tag}{m.group(0)}{close_tag}", highlighted
        )
    return highlighted
