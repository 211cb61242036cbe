from datetime import timezone

import pytest
from loguru import logger

from datecalc.clock import Environment, FixedClock
from datecalc.values import Instant

# 2018-02-08T00:00:00Z
FEB_8 = Instant(1_518_048_000_000_000)


@pytest.fixture(autouse=True)
def silence_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(FEB_8)


@pytest.fixture
def utc_env(fixed_clock: FixedClock) -> Environment:
    """Environment pinned to a known instant, rendering local time as UTC."""
    return Environment(clock=fixed_clock, local_zone=timezone.utc)
