"""Text rendering of instants and deltas.

Every instant takes two lines: seconds since the epoch next to the local
wall-clock time, then the UTC time underneath with its ``=`` aligned::

    time 1      1518048000.000000 s = 2018-02-07T16:00:00.000000-08:00
                                    = 2018-02-08T00:00:00.000000Z

A delta takes one line, with a day/hour/minute/second breakdown::

    delta            75683.456000 s = 0d 21h 01m 23.456000s
"""

from dataclasses import dataclass
from datetime import timezone, tzinfo

from datecalc.exceptions import TimeOverflowError
from datecalc.util import LABEL_WIDTH, SECOND, SECONDS_WIDTH, format_seconds
from datecalc.values import Delta, Instant


@dataclass(frozen=True)
class Report:
    """Ordered, labeled values produced by one invocation."""

    entries: tuple[tuple[str, Instant | Delta], ...]

    def __getitem__(self, label: str) -> Instant | Delta:
        for name, value in self.entries:
            if name == label:
                return value
        raise KeyError(label)

    @property
    def labels(self) -> list[str]:
        return [name for name, _ in self.entries]


def _iso(instant: Instant, tz: tzinfo) -> str:
    return instant.to_datetime(tz).isoformat(timespec="microseconds")


def render_instant(label: str, instant: Instant, local_zone: tzinfo) -> list[str]:
    utc = _iso(instant, timezone.utc).removesuffix("+00:00") + "Z"
    try:
        local = _iso(instant, local_zone)
    except TimeOverflowError as exc:
        raise TimeOverflowError(
            f"{label} {utc}: local time falls outside years 0001-9999", text=label
        ) from exc
    seconds = format_seconds(instant.micros)
    return [
        f"{label:<{LABEL_WIDTH}} {seconds:>{SECONDS_WIDTH}} s = {local}",
        f"{'':<{LABEL_WIDTH}} {'':>{SECONDS_WIDTH}}   = {utc}",
    ]


def render_delta(label: str, delta: Delta) -> str:
    # Only the day field carries the sign, the rest use the magnitude
    sign = "-" if delta.micros < 0 else ""
    whole, micros = divmod(abs(delta.micros), SECOND)
    days, rest = divmod(whole, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return (
        f"{label:<{LABEL_WIDTH}} {format_seconds(delta.micros):>{SECONDS_WIDTH}} s = "
        f"{sign}{days}d {hours:02d}h {minutes:02d}m {seconds:02d}.{micros:06d}s"
    )


def render_report(report: Report, local_zone: tzinfo) -> list[str]:
    """Render every entry of a report, in order.

    The whole report is built before anything is returned, so a value that
    cannot be displayed fails the render without producing partial output.
    """
    lines: list[str] = []
    for label, value in report.entries:
        if isinstance(value, Instant):
            lines.extend(render_instant(label, value, local_zone))
        else:
            lines.append(render_delta(label, value))
    return lines
