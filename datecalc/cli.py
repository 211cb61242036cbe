"""Command-line entry point for ``dates``."""

import sys

import typer
from loguru import logger

from datecalc.clock import Environment
from datecalc.core import run
from datecalc.exceptions import DatesError, UsageError

USAGE = """\
usage: dates              # prints current time (in several forms)
       dates TIME         # prints time TIME (in several forms)
       dates [+-]DELTA    # prints current time offset by DELTA
       dates T1 T2        # prints T1, T2, and the delta between them
       dates T1 [+-]DELTA # prints T1, DELTA, and T2 = T1 + DELTA"""

EXIT_FAILURE = 2

app = typer.Typer(add_completion=False)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, hiding debug output unless asked for."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="{time:HH:mm:ss.SSS} | {level} | {message}",
    )


# Negative deltas and epoch numbers look like short options; let them through
# as positional arguments instead of rejecting them.
@app.command(
    help="Print instants and deltas in several forms.\n\n\b\n" + USAGE,
    context_settings={"ignore_unknown_options": True},
)
def main(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(
        None, metavar="[TIME|DELTA]...", show_default=False
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log each step to stderr."),
) -> None:
    configure_logging(verbose)
    env = ctx.obj if isinstance(ctx.obj, Environment) else Environment()

    try:
        lines = run(args or [], env)
    except DatesError as exc:
        typer.echo(f"dates: {exc}", err=True)
        if isinstance(exc, UsageError):
            typer.echo(USAGE, err=True)
        raise typer.Exit(code=EXIT_FAILURE) from exc

    for line in lines:
        typer.echo(line)
