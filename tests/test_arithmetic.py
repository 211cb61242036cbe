"""Tests for instant/delta arithmetic and value bounds."""

import pytest

from datecalc.arithmetic import add, subtract
from datecalc.exceptions import TimeOverflowError
from datecalc.util import DAY, MAX_DELTA, MAX_INSTANT, MIN_DELTA, MIN_INSTANT
from datecalc.values import Delta, Instant


def test_add_shifts_by_exact_microseconds():
    assert add(Instant(0), Delta(DAY)) == Instant(DAY)
    assert add(Instant(0), Delta(-1)) == Instant(-1)
    assert add(Instant(1_518_048_000_000_000), Delta(0)) == Instant(1_518_048_000_000_000)


def test_add_is_exact_for_large_values():
    """No float intermediate: one microsecond survives at large magnitudes."""
    start = Instant(MAX_INSTANT - 1)
    assert add(start, Delta(1)) == Instant(MAX_INSTANT)
    assert add(Instant(MIN_INSTANT), Delta(1)).micros == MIN_INSTANT + 1


def test_add_overflow_raises():
    with pytest.raises(TimeOverflowError, match="outside the representable range"):
        add(Instant(MAX_INSTANT), Delta(1))

    with pytest.raises(OverflowError):
        add(Instant(MIN_INSTANT), Delta(-1))

    with pytest.raises(OverflowError):
        add(Instant(0), Delta(MAX_DELTA))


def test_subtract_is_second_minus_first():
    earlier = Instant(1_000)
    later = Instant(5_000)
    assert subtract(later, earlier) == Delta(4_000)
    assert subtract(earlier, later) == Delta(-4_000)
    assert subtract(later, later) == Delta(0)


def test_subtract_spans_whole_range():
    assert subtract(Instant(MAX_INSTANT), Instant(MIN_INSTANT)) == Delta(
        MAX_INSTANT - MIN_INSTANT
    )


@pytest.mark.parametrize(
    "a, b",
    [
        (0, 0),
        (0, 1),
        (1_518_048_000_000_000, 1_518_123_683_456_000),
        (1_518_123_683_456_000, 1_518_048_000_000_000),
        (-1_500, 86_400_000_000),
        (MIN_INSTANT, MAX_INSTANT),
        (MAX_INSTANT, MIN_INSTANT),
    ],
)
def test_subtract_then_add_round_trips(a: int, b: int):
    first, second = Instant(a), Instant(b)
    assert add(first, subtract(second, first)) == second


def test_value_bounds():
    Instant(MIN_INSTANT)
    Instant(MAX_INSTANT)
    with pytest.raises(TimeOverflowError):
        Instant(MIN_INSTANT - 1)
    with pytest.raises(TimeOverflowError):
        Instant(MAX_INSTANT + 1)

    Delta(MIN_DELTA)
    Delta(MAX_DELTA)
    with pytest.raises(TimeOverflowError):
        Delta(MAX_DELTA + 1)
    with pytest.raises(TimeOverflowError):
        Delta(MIN_DELTA - 1)


def test_values_are_immutable():
    instant = Instant(0)
    with pytest.raises(AttributeError):
        instant.micros = 1  # type: ignore[misc]


def test_delta_negation():
    assert -Delta(7 * DAY) == Delta(-7 * DAY)
    assert -Delta(0) == Delta(0)


def test_bounds_match_calendar_range():
    from datetime import datetime, timezone

    first = datetime(1, 1, 1, tzinfo=timezone.utc)
    last = datetime(9999, 12, 31, 23, 59, 59, 999999, tzinfo=timezone.utc)
    assert Instant(MIN_INSTANT).to_datetime(timezone.utc) == first
    assert Instant(MAX_INSTANT).to_datetime(timezone.utc) == last
