import time

from repetition_scanner.intervals import IntervalSet
from repetition_scanner.models import Interval
from repetition_scanner.source import StringTextSource


def test_containing_interval_is_half_open():
    ignore = IntervalSet([Interval(10, 15), Interval(2, 5)])

    assert [iv.left for iv in ignore] == [2, 10]
    assert ignore.containing_interval(2) == Interval(2, 5)
    assert ignore.containing_interval(4) == Interval(2, 5)
    assert ignore.containing_interval(5) is None
    assert ignore.containing_interval(1) is None
    assert 14 in ignore
    assert 15 not in ignore


def test_skip_jumps_past_adjacent_intervals():
    ignore = IntervalSet([Interval(0, 3), Interval(3, 7), Interval(9, 12)])

    assert ignore.skip(0) == 7
    assert ignore.skip(5) == 7
    assert ignore.skip(7) == 7
    assert ignore.skip(10) == 12
    assert ignore.skip(12) == 12


def test_next_left_returns_following_interval_start():
    ignore = IntervalSet([Interval(4, 6), Interval(10, 12)])

    assert ignore.next_left(0) == 4
    assert ignore.next_left(4) == 10
    assert ignore.next_left(11) is None


def test_from_providers_first_proposal_wins():
    """Later proposals starting inside an accepted interval are dropped."""
    source = StringTextSource("x" * 20)

    def first(_source):
        return [Interval(5, 10)]

    def second(_source):
        return [Interval(7, 12), Interval(12, 15), Interval(3, 6), Interval(18, 18)]

    ignore = IntervalSet.from_providers(source, [first, second])

    assert list(ignore) == [Interval(3, 6), Interval(5, 10), Interval(12, 15)]
    assert ignore.containing_interval(5) == Interval(3, 6)
    assert ignore.skip(3) == 10
    assert ignore.skip(12) == 15


def test_empty_interval_set():
    ignore = IntervalSet()

    assert not ignore
    assert len(ignore) == 0
    assert ignore.skip(3) == 3
    assert ignore.containing_interval(0) is None
    assert ignore.next_left(0) is None


def test_from_providers_checks_against_merged_coverage():
    """A proposal inside a wider accepted interval is dropped even past narrower ones."""
    source = StringTextSource("x" * 30)

    def narrow(_source):
        return [Interval(5, 10)]

    def wide(_source):
        return [Interval(3, 20), Interval(12, 14), Interval(20, 25)]

    ignore = IntervalSet.from_providers(source, [narrow, wide])

    assert list(ignore) == [Interval(3, 20), Interval(5, 10), Interval(20, 25)]
    assert ignore.skip(12) == 25


def test_from_providers_scales_to_many_intervals():
    count = 20_000
    source = StringTextSource("x" * (count * 4))

    def many(_source):
        return [Interval(i * 4, i * 4 + 2) for i in range(count)]

    def duplicates(_source):
        return [Interval(i * 4 + 1, i * 4 + 3) for i in range(count)]

    started = time.perf_counter()
    ignore = IntervalSet.from_providers(source, [many, duplicates])
    elapsed = time.perf_counter() - started

    assert len(ignore) == count
    assert elapsed < 2.0
