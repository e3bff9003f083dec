from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Tuple


@dataclass(frozen=True, slots=True)
class Interval:
    """A half-open ``[left, right)`` span of ignored character positions."""

    left: int
    right: int

    def __contains__(self, position: int) -> bool:
        return self.left <= position < self.right


@dataclass(frozen=True, slots=True)
class Token:
    """A whitespace-delimited run of text and its half-open source span."""

    text: str
    start_char: int
    end_char: int


@dataclass(slots=True)
class WordWindow:
    """A run of up to ``window_size`` tokens with ignored regions elided."""

    tokens: Deque[Token] = field(default_factory=deque)
    origin: int = field(default=0, compare=False)

    @property
    def start(self) -> int:
        return self.tokens[0].start_char if self.tokens else self.origin

    @property
    def end(self) -> int:
        return self.tokens[-1].end_char if self.tokens else self.origin

    @property
    def text(self) -> str:
        return " ".join(token.text for token in self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def is_empty(self) -> bool:
        return not self.tokens


@dataclass(frozen=True, slots=True)
class Finding:
    """A word occurring at least ``min_occurrence`` times inside a window."""

    word: str
    count: int


@dataclass(frozen=True, slots=True)
class KnownEntry:
    """Suppresses ``word`` for any window overlapping ``[left, right)``."""

    word: str
    left: int
    right: int


@dataclass(frozen=True, slots=True)
class Report:
    """A finding surfaced to the decision handler together with its window."""

    word: str
    count: int
    window_start: int
    window_end: int
    positions: Tuple[int, ...]


class ScanStatus(str, Enum):
    COMPLETED = "completed"
    ABORTED = "aborted"
    INVALID_RANGE = "invalid_range"
