"""Utility constants and helpers for datecalc.

Time unit constants represent durations in microseconds.
These are used throughout the package for consistent time representation.
"""

from datetime import date, datetime, timezone

# Time unit constants (all values in microseconds)
MICROSECOND = 1
MILLISECOND = 1_000
SECOND = 1_000_000
MINUTE = 60_000_000
HOUR = 3_600_000_000
DAY = 86_400_000_000

# Delta suffixes, in the order they are documented
UNITS = {
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
    "d": DAY,
}

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
EPOCH_ORDINAL = date(1970, 1, 1).toordinal()

# Instants are bounded by what can be rendered as an ISO-8601 string
MIN_INSTANT = (date.min.toordinal() - EPOCH_ORDINAL) * DAY
MAX_INSTANT = (date.max.toordinal() - EPOCH_ORDINAL + 1) * DAY - 1

# Deltas are signed 64-bit microsecond counts
MIN_DELTA = -(2**63)
MAX_DELTA = 2**63 - 1

# Report layout
LABEL_WIDTH = 8
SECONDS_WIDTH = 20


def format_seconds(micros: int) -> str:
    """Render a microsecond count as signed seconds with six fractional digits."""
    sign = "-" if micros < 0 else ""
    whole, frac = divmod(abs(micros), SECOND)
    return f"{sign}{whole}.{frac:06d}"
