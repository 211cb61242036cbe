"""Exact integer arithmetic between instants and deltas."""

from loguru import logger

from datecalc.values import Delta, Instant


def add(instant: Instant, delta: Delta) -> Instant:
    """Return ``instant`` shifted by ``delta``.

    Raises:
        TimeOverflowError: If the result leaves the representable range.
    """
    result = instant + delta
    logger.debug("{} + {} = {}", instant, delta, result)
    return result


def subtract(minuend: Instant, subtrahend: Instant) -> Delta:
    """Return the delta that carries ``subtrahend`` to ``minuend``.

    The result is negative when ``minuend`` is the earlier instant, so
    ``add(subtrahend, subtract(minuend, subtrahend)) == minuend`` always holds.
    """
    result = minuend - subtrahend
    logger.debug("{} - {} = {}", minuend, subtrahend, result)
    return result
