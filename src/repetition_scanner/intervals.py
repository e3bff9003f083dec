from __future__ import annotations

import logging
from bisect import bisect_left, bisect_right
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, List, Sequence

from .models import Interval

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .source import TextSource

logger = logging.getLogger(__name__)

IgnoreProvider = Callable[["TextSource"], Iterable[Interval]]


class IntervalSet:
    """
    Sorted collection of half-open ignored intervals.

    Intervals are ordered by ``left``. Callers are expected to hand in
    non-overlapping intervals, but lookups stay correct when a later interval
    swallows the start of an earlier one: ``_reach[i]`` holds the largest
    ``right`` among the first ``i + 1`` intervals.
    """

    def __init__(self, intervals: Iterable[Interval] = ()) -> None:
        self._intervals: List[Interval] = sorted(intervals, key=lambda iv: iv.left)
        self._lefts: List[int] = [iv.left for iv in self._intervals]
        self._reach: List[int] = []
        running = 0
        for interval in self._intervals:
            running = max(running, interval.right)
            self._reach.append(running)

    @classmethod
    def from_providers(
        cls, source: "TextSource", providers: Sequence[IgnoreProvider]
    ) -> "IntervalSet":
        """Merge provider output; a proposal starting inside an accepted interval is dropped."""
        accepted: List[Interval] = []
        # Union of accepted intervals as disjoint sorted spans.
        cover_lefts: List[int] = []
        cover_rights: List[int] = []
        for provider in providers:
            for interval in provider(source):
                if interval.left >= interval.right:
                    logger.debug("Dropping empty ignore interval %s", interval)
                    continue
                idx = bisect_right(cover_lefts, interval.left)
                if idx > 0 and cover_rights[idx - 1] > interval.left:
                    logger.debug("Dropping overlapping ignore interval %s", interval)
                    continue
                accepted.append(interval)
                end = bisect_left(cover_lefts, interval.right, lo=idx)
                right = interval.right
                if end > idx:
                    right = max(right, cover_rights[end - 1])
                cover_lefts[idx:end] = [interval.left]
                cover_rights[idx:end] = [right]
        return cls(accepted)

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self._intervals)

    def __bool__(self) -> bool:
        return bool(self._intervals)

    def __contains__(self, position: int) -> bool:
        return self.containing_interval(position) is not None

    def __repr__(self) -> str:
        return f"IntervalSet({self._intervals!r})"

    def containing_interval(self, position: int) -> Interval | None:
        """Return the first interval with ``left <= position < right``."""
        idx = bisect_right(self._lefts, position) - 1
        found: Interval | None = None
        # _reach is non-decreasing, so once it drops to position no earlier
        # interval can contain it.
        while idx >= 0 and self._reach[idx] > position:
            if position in self._intervals[idx]:
                found = self._intervals[idx]
            idx -= 1
        return found

    def skip(self, position: int) -> int:
        """Return the first position at or after ``position`` that is not ignored."""
        for _ in range(len(self._intervals)):
            idx = bisect_right(self._lefts, position) - 1
            if idx < 0 or self._reach[idx] <= position:
                return position
            position = self._reach[idx]
        return position

    def next_left(self, position: int) -> int | None:
        """Return the left edge of the first interval starting after ``position``."""
        idx = bisect_right(self._lefts, position)
        if idx < len(self._lefts):
            return self._lefts[idx]
        return None
