"""Ambient inputs of a run: the current instant and the local time zone."""

import time
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Protocol

from dateutil import tz

from datecalc.values import Instant


class Clock(Protocol):
    """Protocol for getting the current instant.  Inject a fake in tests."""

    def now(self) -> Instant: ...


class SystemClock:
    """Default clock backed by the real system time."""

    def now(self) -> Instant:
        return Instant(time.time_ns() // 1_000)


@dataclass(frozen=True)
class FixedClock:
    """Clock that always reports the same instant."""

    instant: Instant

    def now(self) -> Instant:
        return self.instant


def local_zone() -> tzinfo:
    """Return the process's local zone, honouring ``TZ`` when it is set."""
    return tz.tzlocal()


@dataclass(frozen=True)
class Environment:
    """Collaborators sampled once at the start of a run.

    The local zone is a tzinfo rather than a fixed offset, so every rendered
    instant gets the offset that was in effect at that instant.
    """

    clock: Clock = field(default_factory=SystemClock)
    local_zone: tzinfo = field(default_factory=local_zone)
