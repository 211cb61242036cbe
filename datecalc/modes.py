"""Interpretation of the positional arguments.

The shape of the arguments alone selects one of five modes::

    dates                 Now
    dates TIME            ShowInstant
    dates [+-]DELTA       NowPlusDelta
    dates T1 T2           TwoInstants
    dates T1 [+-]DELTA    InstantPlusDelta

Classification never parses anything; each mode parses its own arguments
when it is evaluated, and reads the clock only after parsing succeeded.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from loguru import logger
from typing_extensions import override

from datecalc.arithmetic import add, subtract
from datecalc.clock import Clock
from datecalc.exceptions import TimeOverflowError, UsageError
from datecalc.parsing import looks_like_delta, parse_delta, parse_instant
from datecalc.render import Report
from datecalc.values import Delta, Instant


class Mode(ABC):

    @abstractmethod
    def evaluate(self, clock: Clock) -> Report:
        """Parse this mode's arguments and compute the labeled values."""
        pass


def _shift(origin: str, delta: str, start: Instant, offset: Delta) -> Instant:
    try:
        return add(start, offset)
    except TimeOverflowError as exc:
        raise TimeOverflowError(
            f"adding {delta!r} to {origin}: result falls outside years 0001-9999",
            text=delta,
        ) from exc


@dataclass(frozen=True)
class Now(Mode):
    @override
    def evaluate(self, clock: Clock) -> Report:
        return Report((("now", clock.now()),))


@dataclass(frozen=True)
class ShowInstant(Mode):
    time: str

    @override
    def evaluate(self, clock: Clock) -> Report:
        return Report((("time", parse_instant(self.time)),))


@dataclass(frozen=True)
class NowPlusDelta(Mode):
    delta: str

    @override
    def evaluate(self, clock: Clock) -> Report:
        delta = parse_delta(self.delta)
        start = clock.now()
        end = _shift("now", self.delta, start, delta)
        return Report((("time 1", start), ("delta", delta), ("time 2", end)))


@dataclass(frozen=True)
class InstantPlusDelta(Mode):
    time: str
    delta: str

    @override
    def evaluate(self, clock: Clock) -> Report:
        start = parse_instant(self.time)
        delta = parse_delta(self.delta)
        end = _shift(repr(self.time), self.delta, start, delta)
        return Report((("time 1", start), ("delta", delta), ("time 2", end)))


@dataclass(frozen=True)
class TwoInstants(Mode):
    first: str
    second: str

    @override
    def evaluate(self, clock: Clock) -> Report:
        first = parse_instant(self.first)
        second = parse_instant(self.second)
        return Report(
            (
                ("time 1", first),
                ("time 2", second),
                ("delta", subtract(second, first)),
            )
        )


def classify(
    args: Sequence[str], is_delta: Callable[[str], bool] = looks_like_delta
) -> Mode:
    """Select the mode for a list of positional arguments.

    Args:
        args: Positional arguments, flags already removed
        is_delta: Lexical predicate deciding whether an argument is a delta

    Raises:
        UsageError: If more than two arguments are given.
    """
    mode: Mode
    if len(args) > 2:
        raise UsageError(args, f"too many arguments ({len(args)}, at most 2)")
    if not args:
        mode = Now()
    elif len(args) == 1:
        mode = NowPlusDelta(args[0]) if is_delta(args[0]) else ShowInstant(args[0])
    elif is_delta(args[1]):
        mode = InstantPlusDelta(args[0], args[1])
    else:
        mode = TwoInstants(args[0], args[1])
    logger.debug("classified {!r} as {!r}", list(args), mode)
    return mode
