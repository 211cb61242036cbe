from collections.abc import Sequence

from datecalc.clock import Environment
from datecalc.modes import classify
from datecalc.render import Report, render_report


def evaluate(args: Sequence[str], env: Environment | None = None) -> Report:
    """Classify ``args`` and compute the values they describe."""
    env = env or Environment()
    return classify(args).evaluate(env.clock)


def run(args: Sequence[str], env: Environment | None = None) -> list[str]:
    """Return the report lines for one invocation.

    Nothing is rendered until every argument has been parsed and every
    value computed, so any error leaves no partial report behind.
    """
    env = env or Environment()
    return render_report(evaluate(args, env), env.local_zone)
