"""Parsers turning command-line text into instants and deltas.

Instants are accepted in three forms, tried in order:

- an optionally signed integer, read as milliseconds since the epoch
  (``1518048000000``);
- an optionally signed decimal with a fractional part, read as seconds since
  the epoch (``1518048000.5``);
- an ISO-8601 style date string (``2018-02-08``, ``2018-02-08T21:01:23.456Z``,
  ``2018-02-08 21:01+01:00``). A missing time means midnight and a missing
  offset means UTC.

Deltas are an optional sign, decimal digits and exactly one unit suffix
(``+7d``, ``-90m``, ``250ms``).
"""

import re
from datetime import datetime

from loguru import logger

from datecalc.exceptions import DeltaParseError, InstantParseError, TimeOverflowError
from datecalc.util import (
    DAY,
    EPOCH_ORDINAL,
    HOUR,
    MILLISECOND,
    MINUTE,
    SECOND,
    UNITS,
)
from datecalc.values import Delta, Instant

_DELTA_RE = re.compile(r"(?P<sign>[+-]?)(?P<magnitude>[0-9]+)(?P<unit>ms|s|m|h|d)")

_MILLIS_RE = re.compile(r"[+-]?[0-9]+")

_SECONDS_RE = re.compile(r"(?P<sign>[+-]?)(?P<whole>[0-9]+)\.(?P<fraction>[0-9]+)")

# Longer digit strings overflow every range we accept, and int() refuses
# very long strings outright
_MAX_DIGITS = 20

_OUT_OF_RANGE = "outside the representable range of years 0001-9999"

_DATE_RE = re.compile(
    r"""
    (?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})
    (?:
        [Tt ]
        (?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})
        (?::(?P<second>[0-9]{2})(?:\.(?P<fraction>[0-9]+))?)?
        (?P<offset>[Zz]|(?P<offset_sign>[+-])(?P<offset_hour>[0-9]{2}):?(?P<offset_minute>[0-9]{2}))?
    )?
    """,
    re.VERBOSE,
)


def _fraction_micros(digits: str) -> int:
    # Digits past the sixth are truncated, never rounded
    return int(digits[:6].ljust(6, "0"))


def looks_like_delta(text: str) -> bool:
    """Return True if text is an explicitly signed delta such as ``+7d``.

    This is a purely lexical check: the magnitude is not range checked, so a
    text that looks like a delta can still fail in :func:`parse_delta`.
    """
    return text[:1] in ("+", "-") and _DELTA_RE.fullmatch(text) is not None


def parse_delta(text: str) -> Delta:
    """Parse ``[+-]DIGITS UNIT`` into a Delta.

    Raises:
        DeltaParseError: If the text does not match the grammar or the
            scaled magnitude overflows.
    """
    match = _DELTA_RE.fullmatch(text)
    if match is None:
        raise DeltaParseError(
            text, f"expected [+-]DIGITS followed by one of {', '.join(UNITS)}"
        )

    digits = match["magnitude"].lstrip("0")
    if len(digits) > _MAX_DIGITS:
        raise DeltaParseError(text, "magnitude is too large")
    magnitude = int(digits or "0")
    if match["sign"] == "-":
        magnitude = -magnitude

    try:
        delta = Delta(magnitude * UNITS[match["unit"]])
    except TimeOverflowError as exc:
        raise DeltaParseError(text, "magnitude is too large") from exc

    logger.debug("parsed delta {!r} as {}", text, delta)
    return delta


def _instant(text: str, micros: int) -> Instant:
    try:
        return Instant(micros)
    except TimeOverflowError as exc:
        raise InstantParseError(text, _OUT_OF_RANGE) from exc


def _parse_date_string(text: str) -> Instant | None:
    match = _DATE_RE.fullmatch(text)
    if match is None:
        return None

    fraction = match["fraction"] or ""
    try:
        # datetime validates every calendar and clock field for us
        wall = datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"] or 0),
            int(match["minute"] or 0),
            int(match["second"] or 0),
            _fraction_micros(fraction) if fraction else 0,
        )
    except ValueError as exc:
        raise InstantParseError(text, str(exc)) from exc

    offset = 0
    if match["offset_sign"]:
        offset_hour = int(match["offset_hour"])
        offset_minute = int(match["offset_minute"])
        if offset_hour > 23 or offset_minute > 59:
            raise InstantParseError(
                text, f"UTC offset {match['offset']!r} is out of range"
            )
        offset = offset_hour * HOUR + offset_minute * MINUTE
        if match["offset_sign"] == "-":
            offset = -offset

    micros = (
        (wall.toordinal() - EPOCH_ORDINAL) * DAY
        + wall.hour * HOUR
        + wall.minute * MINUTE
        + wall.second * SECOND
        + wall.microsecond
    )
    return _instant(text, micros - offset)


def parse_instant(text: str) -> Instant:
    """Parse an epoch number or a date string into an Instant.

    Raises:
        InstantParseError: If the text matches no accepted form, names an
            out-of-range calendar field, or lies outside years 0001-9999.
    """
    if _MILLIS_RE.fullmatch(text):
        if len(text.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
            raise InstantParseError(text, _OUT_OF_RANGE)
        instant = _instant(text, int(text) * MILLISECOND)
        logger.debug("parsed {!r} as epoch milliseconds: {}", text, instant)
        return instant

    match = _SECONDS_RE.fullmatch(text)
    if match is not None:
        whole = match["whole"].lstrip("0")
        if len(whole) > _MAX_DIGITS:
            raise InstantParseError(text, _OUT_OF_RANGE)
        micros = int(whole or "0") * SECOND + _fraction_micros(match["fraction"])
        if match["sign"] == "-":
            micros = -micros
        instant = _instant(text, micros)
        logger.debug("parsed {!r} as epoch seconds: {}", text, instant)
        return instant

    instant = _parse_date_string(text)
    if instant is None:
        raise InstantParseError(
            text,
            "expected epoch milliseconds, epoch seconds with a fraction, "
            "or a date such as 2018-02-08T21:01:23.456Z",
        )
    logger.debug("parsed {!r} as a date string: {}", text, instant)
    return instant
