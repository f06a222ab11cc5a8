"""
screensync.utils - Shared utility functions.

Text statistics and filename helpers used by the CLI and the store.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

WORDS_PER_PAGE = 250


@dataclass(frozen=True)
class TextStats:
    words: int
    characters: int
    pages: int


def compute_stats(text: str, words_per_page: int = WORDS_PER_PAGE) -> TextStats:
    """Count words and characters and estimate screenplay pages.

    Args:
        text: Screenplay text snapshot
        words_per_page: Words per page used for the estimate (default 250)

    Returns:
        TextStats with at least one page
    """
    words = len(text.split())
    pages = max(1, math.ceil(words / words_per_page))
    return TextStats(words=words, characters=len(text), pages=pages)


def suggest_filename(title: str) -> str:
    """Derive a filename from a title: non-alphanumerics become '_', lower-cased."""
    return re.sub(r"[^a-zA-Z0-9]", "_", title).lower()
