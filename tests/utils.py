from __future__ import annotations

from typing import List

from repetition_scanner.models import Interval, WordWindow


def window_words(window: WordWindow) -> List[str]:
    """Return the token texts currently held by a window."""
    return [token.text for token in window.tokens]


def interval_over(text: str, fragment: str, occurrence: int = 1) -> Interval:
    """Return the interval covering the n-th occurrence of ``fragment`` in ``text``."""
    start = -1
    for _ in range(occurrence):
        start = text.index(fragment, start + 1)
    return Interval(start, start + len(fragment))
