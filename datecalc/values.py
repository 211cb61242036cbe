from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo

from datecalc.exceptions import TimeOverflowError, out_of_range
from datecalc.util import EPOCH, MAX_DELTA, MAX_INSTANT, MIN_DELTA, MIN_INSTANT


@dataclass(frozen=True, order=True)
class Delta:
    """Signed duration counted in microseconds."""

    micros: int

    def __post_init__(self) -> None:
        if not MIN_DELTA <= self.micros <= MAX_DELTA:
            raise out_of_range("delta", self.micros, MIN_DELTA, MAX_DELTA)

    def __neg__(self) -> "Delta":
        return Delta(-self.micros)

    def __str__(self) -> str:
        return f"Delta({self.micros}µs)"


@dataclass(frozen=True, order=True)
class Instant:
    """Point on the UTC timeline, in microseconds since the Unix epoch."""

    micros: int

    def __post_init__(self) -> None:
        if not MIN_INSTANT <= self.micros <= MAX_INSTANT:
            raise out_of_range("instant", self.micros, MIN_INSTANT, MAX_INSTANT)

    def __add__(self, other: Delta) -> "Instant":
        if not isinstance(other, Delta):
            return NotImplemented
        return Instant(self.micros + other.micros)

    def __sub__(self, other: "Instant") -> Delta:
        if not isinstance(other, Instant):
            return NotImplemented
        return Delta(self.micros - other.micros)

    def to_datetime(self, tz: tzinfo) -> datetime:
        """Return an aware datetime for this instant in the given zone.

        Raises:
            TimeOverflowError: If the zone's offset pushes the wall-clock
                time past the years datetime can represent.
        """
        utc = EPOCH + timedelta(microseconds=self.micros)
        try:
            return utc.astimezone(tz)
        except OverflowError:
            # Zones such as dateutil's tzlocal look at neighbouring wall times
            # during conversion, which can step past the calendar edges even
            # when the wall time itself is representable
            naive = utc.replace(tzinfo=None)
            try:
                offset = tz.utcoffset(naive) or timedelta(0)
                wall = naive + offset
            except OverflowError as exc:
                raise TimeOverflowError(
                    f"local time of {utc.isoformat()} falls outside years 0001-9999"
                ) from exc
            # A fixed offset, since asking tz again would step past the edge
            return wall.replace(tzinfo=timezone(offset))

    def __str__(self) -> str:
        return f"Instant({self.micros}µs)"
