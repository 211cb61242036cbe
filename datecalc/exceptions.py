"""Exceptions raised while interpreting and evaluating dates arguments."""

from collections.abc import Sequence


class DatesError(Exception):
    """Base exception for every error reported to the user."""


class UsageError(DatesError):
    """Raised when the argument list has an unsupported shape."""

    def __init__(self, args: Sequence[str], message: str = "too many arguments") -> None:
        self.args_given: tuple[str, ...] = tuple(args)
        super().__init__(message)


class ParseError(DatesError, ValueError):
    """Raised when an argument does not match the expected grammar."""

    kind: str = "a value"

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"could not parse {text!r} as {self.kind}: {reason}")


class InstantParseError(ParseError):
    """Raised when text is neither an epoch number nor a date string."""

    kind = "a time"


class DeltaParseError(ParseError):
    """Raised when text is not a signed magnitude followed by a unit."""

    kind = "a delta"


class TimeOverflowError(DatesError, OverflowError):
    """Raised when a value falls outside the representable range.

    ``text`` names the argument or report entry responsible, when known.
    """

    def __init__(self, message: str, text: str | None = None) -> None:
        self.text = text
        super().__init__(message)


def out_of_range(what: str, micros: int, low: int, high: int) -> TimeOverflowError:
    return TimeOverflowError(
        f"{what} of {micros} microseconds is outside the representable "
        f"range [{low}, {high}]"
    )
