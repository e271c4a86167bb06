"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Add project root to path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from powerplan.program.enums import ExperienceTier, Lift
from powerplan.program.types import LifterProfile, Maxes


@pytest.fixture(autouse=True)
def _reset_logger():
    """Restore loguru's default stderr sink after each test.

    CLI tests call setup_logger, which binds a sink to the runner's
    captured stream; later tests must not write into a closed stream.
    """
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def maxes() -> Maxes:
    """Reference maxes used across generator tests."""
    return Maxes(squat=150, bench=100, deadlift=180)


@pytest.fixture
def intermediate_profile(maxes: Maxes) -> LifterProfile:
    """Intermediate lifter, 3 days/week, 4-week cycle."""
    return LifterProfile(
        experience=ExperienceTier.INTERMEDIATE,
        current_maxes=maxes,
        days_per_week=3,
        duration_weeks=4,
    )


@pytest.fixture
def advanced_bench_profile(maxes: Maxes) -> LifterProfile:
    """Advanced lifter, 5 days/week with bench priority, 6-week cycle."""
    return LifterProfile(
        experience=ExperienceTier.ADVANCED,
        current_maxes=maxes,
        days_per_week=5,
        duration_weeks=6,
        priority_lift=Lift.BENCH,
    )
