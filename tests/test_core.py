"""End-to-end tests of the controller, without the command-line layer."""

from datetime import timedelta, timezone

import pytest

from datecalc.clock import Environment, FixedClock, SystemClock
from datecalc.core import evaluate, run
from datecalc.exceptions import InstantParseError, TimeOverflowError, UsageError
from datecalc.values import Delta, Instant


def test_two_instants(utc_env):
    lines = run(["2018-02-08T00:00:00.000Z", "2018-02-08T21:01:23.456Z"], utc_env)
    assert len(lines) == 5
    assert "1518048000.000000 s =" in lines[0]
    assert "1518123683.456000 s =" in lines[2]
    assert lines[4].endswith("75683.456000 s = 0d 21h 01m 23.456000s")


def test_epoch_milliseconds(utc_env):
    lines = run(["1518048000000"], utc_env)
    assert lines[0].startswith("time ")
    assert "1518048000.000000 s =" in lines[0]
    assert lines[1].endswith("= 2018-02-08T00:00:00.000000Z")


def test_now_is_a_single_block(utc_env):
    lines = run([], utc_env)
    assert len(lines) == 2
    assert lines[0].startswith("now ")
    assert lines[1].endswith("= 2018-02-08T00:00:00.000000Z")


def test_now_with_system_collaborators():
    lines = run([], Environment(clock=SystemClock()))
    assert len(lines) == 2
    assert lines[0].startswith("now ")


def test_plus_and_minus_delta_are_negations(utc_env):
    plus = run(["+7d"], utc_env)
    minus = run(["-7d"], utc_env)
    assert plus[0] == minus[0]
    assert plus[2].endswith(" 604800.000000 s = 7d 00h 00m 00.000000s")
    assert minus[2].endswith("-604800.000000 s = -7d 00h 00m 00.000000s")
    assert plus[3].endswith("= 2018-02-15T00:00:00.000000+00:00")
    assert minus[3].endswith("= 2018-02-01T00:00:00.000000+00:00")


def test_instant_plus_delta(utc_env):
    report = evaluate(["2018-02-08", "+90m"], utc_env)
    assert report.labels == ["time 1", "delta", "time 2"]
    assert report["time 2"] == Instant(1_518_053_400_000_000)


def test_evaluate_two_instants_in_reverse(utc_env):
    report = evaluate(["1518123683456", "1518048000000"], utc_env)
    assert report["delta"] == Delta(-75_683_456_000)


def test_parse_failure_names_the_argument(utc_env):
    with pytest.raises(InstantParseError, match="'2018-13-01'"):
        run(["2018-13-01"], utc_env)


def test_too_many_arguments(utc_env):
    with pytest.raises(UsageError):
        run(["1", "2", "3"], utc_env)


def test_overflow(utc_env):
    with pytest.raises(TimeOverflowError):
        run(["9999-12-31T23:59:59Z", "+1s"], utc_env)


def test_unrenderable_local_time_fails_whole_run():
    env = Environment(
        clock=FixedClock(Instant(0)), local_zone=timezone(timedelta(hours=-1))
    )
    with pytest.raises(TimeOverflowError):
        run(["2018-02-08", "0001-01-01"], env)
