from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, List

from .config import ScannerConfig
from .decisions import ContinueAlways, Decision, DecisionHandler
from .detection import exceeders, word_occurrences
from .ignore import create_providers
from .intervals import IntervalSet
from .known import KnownFindingsTable
from .models import Interval, Report, ScanStatus, WordWindow
from .source import StringTextSource, TextSource
from .window import advance_window, first_window

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanState:
    """Everything needed to continue a scan from where it stopped."""

    current_position: int
    range_end: int
    ignore: IntervalSet = field(default_factory=IntervalSet)
    window: WordWindow | None = None
    known: KnownFindingsTable = field(default_factory=KnownFindingsTable)


@dataclass(slots=True)
class ScanOutcome:
    """Terminal result of one scan invocation."""

    status: ScanStatus
    position: int | None = None
    reports: List[Report] = field(default_factory=list)
    state: ScanState | None = None

    @property
    def completed(self) -> bool:
        return self.status is ScanStatus.COMPLETED

    @property
    def aborted(self) -> bool:
        return self.status is ScanStatus.ABORTED


class RepetitionScanner:
    """
    Slides a word window over a text range and surfaces repeated words.

    Each window is checked for words reaching ``min_occurrence``; words already
    surfaced for an overlapping window are suppressed. Every occurrence of a
    surviving word is handed to the decision handler, and a verdict other than
    ``Decision.CONTINUE`` stops the scan at that occurrence.
    """

    def __init__(
        self,
        config: ScannerConfig | None = None,
        handler: DecisionHandler | None = None,
    ) -> None:
        self.config = config or ScannerConfig()
        self.config.validate()
        self.handler = handler or ContinueAlways()

    def build_ignore(self, source: TextSource) -> IntervalSet:
        """Build the ignore set from the configured presets and patterns."""
        providers = create_providers(
            self.config.ignore_presets, self.config.ignore_patterns
        )
        return IntervalSet.from_providers(source, providers)

    def scan(
        self,
        source: TextSource,
        range_begin: int = 0,
        range_end: int | None = None,
        ignore: IntervalSet | Iterable[Interval] | None = None,
    ) -> ScanOutcome:
        """Scan ``[range_begin, range_end)``; an explicit ``ignore`` replaces the configured one."""
        if range_end is None:
            range_end = len(source)
        if range_begin < 0 or range_end <= range_begin:
            logger.warning("Invalid scan range [%s, %s)", range_begin, range_end)
            return ScanOutcome(status=ScanStatus.INVALID_RANGE)

        if ignore is None:
            ignore_set = self.build_ignore(source)
        elif isinstance(ignore, IntervalSet):
            ignore_set = ignore
        else:
            ignore_set = IntervalSet(ignore)

        state = ScanState(
            current_position=range_begin, range_end=range_end, ignore=ignore_set
        )
        logger.info(
            "Scanning [%d, %d) window=%d min_occurrence=%d ignored=%d",
            range_begin,
            range_end,
            self.config.window_size,
            self.config.min_occurrence,
            len(ignore_set),
        )
        return self._run(source, state)

    def resume(
        self, source: TextSource, state: ScanState, refresh_window: bool = False
    ) -> ScanOutcome:
        """Continue a previous scan; pass ``refresh_window`` after editing the text."""
        if refresh_window:
            if state.window is not None:
                state.current_position = min(state.current_position, state.window.start)
            state.window = None
        logger.info("Resuming scan at %d", state.current_position)
        return self._run(source, state)

    def _run(self, source: TextSource, state: ScanState) -> ScanOutcome:
        size = self.config.window_size
        reports: List[Report] = []
        while state.current_position < state.range_end:
            if state.window is None:
                state.window = first_window(
                    source, size, state.current_position, state.ignore
                )
            window = state.window
            if window.is_empty():
                break
            if len(window) < size or window.end > state.range_end:
                if self.config.scan_partial_windows:
                    tail = _truncate(window, state.range_end)
                    if not tail.is_empty():
                        stopped_at = self._evaluate(tail, state, reports)
                        if stopped_at is not None:
                            return self._abort(state, reports, stopped_at)
                break
            stopped_at = self._evaluate(window, state, reports)
            if stopped_at is not None:
                return self._abort(state, reports, stopped_at)
            advance_window(source, window, size, state.ignore)
            state.current_position = window.start

        logger.info("Scan completed with %d finding(s)", len(reports))
        return ScanOutcome(status=ScanStatus.COMPLETED, reports=reports, state=state)

    def _evaluate(
        self, window: WordWindow, state: ScanState, reports: List[Report]
    ) -> int | None:
        """Report new findings of ``window``; return the occurrence that stopped the scan."""
        cfg = self.config
        candidates = exceeders(window.text, cfg.min_occurrence, cfg.min_word_length)
        surviving = state.known.filter(candidates, window.start, window.end)
        state.known.update(surviving, window.start, window.end)
        for index, finding in enumerate(surviving):
            positions = word_occurrences(window, finding.word, cfg.min_word_length)
            reports.append(
                Report(
                    word=finding.word,
                    count=finding.count,
                    window_start=window.start,
                    window_end=window.end,
                    positions=tuple(positions),
                )
            )
            logger.debug(
                "Repeated word %r x%d in [%d, %d)",
                finding.word,
                finding.count,
                window.start,
                window.end,
            )
            for position in positions:
                if self.handler.decide(finding.word, position) != Decision.CONTINUE:
                    # Findings never shown must stay reportable on resume.
                    state.known.forget(
                        (later.word for later in surviving[index + 1 :]),
                        window.start,
                        window.end,
                    )
                    return position
        return None

    def _abort(
        self, state: ScanState, reports: List[Report], position: int
    ) -> ScanOutcome:
        logger.info("Scan stopped at %d", position)
        # The cached window stays, so resume still re-checks it from its start.
        state.current_position = position
        return ScanOutcome(
            status=ScanStatus.ABORTED, position=position, reports=reports, state=state
        )


def _truncate(window: WordWindow, range_end: int) -> WordWindow:
    tokens = deque(token for token in window.tokens if token.end_char <= range_end)
    return WordWindow(tokens=tokens, origin=window.start)


def scan(
    source: TextSource | str,
    range_begin: int = 0,
    range_end: int | None = None,
    window_size: int = 100,
    min_occurrence: int = 2,
    min_word_length: int = 4,
    ignore: IntervalSet | Iterable[Interval] | None = None,
    handler: DecisionHandler | None = None,
    scan_partial_windows: bool = False,
) -> ScanOutcome:
    """Convenience wrapper building a RepetitionScanner for a single pass."""
    if isinstance(source, str):
        source = StringTextSource(source)
    config = ScannerConfig(
        window_size=window_size,
        min_occurrence=min_occurrence,
        min_word_length=min_word_length,
        scan_partial_windows=scan_partial_windows,
    )
    scanner = RepetitionScanner(config, handler)
    return scanner.scan(source, range_begin, range_end, ignore)
