from __future__ import annotations

from typing import Iterable, Iterator, List

from .models import Finding, KnownEntry


class KnownFindingsTable:
    """Remembers which words were already surfaced for which window span."""

    def __init__(self, entries: Iterable[KnownEntry] = ()) -> None:
        self._entries: List[KnownEntry] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[KnownEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"KnownFindingsTable({self._entries!r})"

    def clear(self) -> None:
        self._entries.clear()

    def filter(
        self, candidates: Iterable[Finding], window_left: int, window_right: int
    ) -> List[Finding]:
        """Drop candidates whose word is known for a span overlapping the window."""
        suppressed = {
            entry.word
            for entry in self._entries
            if entry.left < window_right and entry.right > window_left
        }
        return [finding for finding in candidates if finding.word not in suppressed]

    def update(
        self, surviving: Iterable[Finding], window_left: int, window_right: int
    ) -> None:
        """Evict entries left behind by the window, then record the survivors."""
        self._entries = [entry for entry in self._entries if entry.right >= window_left]
        for finding in surviving:
            self._entries.append(KnownEntry(finding.word, window_left, window_right))

    def forget(self, words: Iterable[str], window_left: int, window_right: int) -> None:
        """Drop the entries recorded for ``words`` over exactly this window span."""
        dropped = set(words)
        self._entries = [
            entry
            for entry in self._entries
            if not (
                entry.word in dropped
                and entry.left == window_left
                and entry.right == window_right
            )
        ]
