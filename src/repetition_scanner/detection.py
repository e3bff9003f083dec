from __future__ import annotations

import re
from collections import Counter
from typing import Iterator, List

from .models import Finding, WordWindow

# Maximal runs of letters; digits, underscores and punctuation split words.
WORD_PATTERN = re.compile(r"[^\W\d_]+", re.UNICODE)


def iter_words(text: str, min_word_length: int) -> Iterator[str]:
    """Yield case-folded words of at least ``min_word_length`` letters."""
    for match in WORD_PATTERN.finditer(text):
        word = match.group()
        if len(word) >= min_word_length:
            yield word.lower()


def exceeders(text: str, min_occurrence: int = 2, min_word_length: int = 4) -> List[Finding]:
    """Return words occurring at least ``min_occurrence`` times, in first-seen order."""
    counts: Counter[str] = Counter(iter_words(text, min_word_length))
    return [
        Finding(word=word, count=count)
        for word, count in counts.items()
        if count >= min_occurrence
    ]


def word_occurrences(window: WordWindow, word: str, min_word_length: int = 4) -> List[int]:
    """Return source positions of every occurrence of ``word`` inside ``window``."""
    positions: List[int] = []
    if len(word) < min_word_length:
        return positions
    for token in window.tokens:
        for match in WORD_PATTERN.finditer(token.text):
            if match.group().lower() == word:
                positions.append(token.start_char + match.start())
    return positions
