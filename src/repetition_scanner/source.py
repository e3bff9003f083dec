from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class TextSource(ABC):
    """Read-only document of addressable characters."""

    @abstractmethod
    def char_at(self, position: int) -> str:
        """Return the character stored at ``position``."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def substring(self, start: int, end: int) -> str:
        """Materialize the characters in ``[start, end)``."""
        raise NotImplementedError

    def full_text(self) -> str:
        return self.substring(0, len(self))


class StringTextSource(TextSource):
    """Text source backed by an in-memory string."""

    def __init__(self, text: str) -> None:
        self._text = text

    def char_at(self, position: int) -> str:
        return self._text[position]

    def __len__(self) -> int:
        return len(self._text)

    def substring(self, start: int, end: int) -> str:
        return self._text[start:end]

    def full_text(self) -> str:
        return self._text


def load_text_source(path: str | Path) -> StringTextSource:
    """Read a UTF-8 text file into a StringTextSource."""
    return StringTextSource(Path(path).read_text(encoding="utf-8"))
