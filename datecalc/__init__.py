from .arithmetic import add, subtract
from .clock import Clock, Environment, FixedClock, SystemClock, local_zone
from .core import evaluate, run
from .exceptions import (
    DatesError,
    DeltaParseError,
    InstantParseError,
    ParseError,
    TimeOverflowError,
    UsageError,
)
from .modes import (
    InstantPlusDelta,
    Mode,
    Now,
    NowPlusDelta,
    ShowInstant,
    TwoInstants,
    classify,
)
from .parsing import looks_like_delta, parse_delta, parse_instant
from .render import Report, render_delta, render_instant, render_report
from .values import Delta, Instant

__all__ = [
    "Instant",
    "Delta",
    "Report",
    "Mode",
    "Now",
    "ShowInstant",
    "NowPlusDelta",
    "InstantPlusDelta",
    "TwoInstants",
    "classify",
    "parse_instant",
    "parse_delta",
    "looks_like_delta",
    "add",
    "subtract",
    "render_instant",
    "render_delta",
    "render_report",
    "evaluate",
    "run",
    "Clock",
    "SystemClock",
    "FixedClock",
    "Environment",
    "local_zone",
    "DatesError",
    "UsageError",
    "ParseError",
    "InstantParseError",
    "DeltaParseError",
    "TimeOverflowError",
]
