"""Percentage tables and load arithmetic - single source of truth.

Every working weight in a generated program is derived here:
- Static per-scheme, per-week {heavy, light} set prescriptions
- Week lookup with an explicit fallback-to-week-1 policy
- Rounding to a loadable plate increment

Tables are a coach's periodization chart and are reproduced literally.
"""

import math

from loguru import logger
from pydantic import ValidationError

from powerplan.config.settings import VALID_TRAINING_MAX_PERCENTAGES, settings
from powerplan.program.enums import CycleType
from powerplan.program.errors import InvalidProfileError
from powerplan.program.models import WeekSets
from powerplan.program.types import Maxes, SetPrescription
from powerplan.program.validators import format_validation_error, validate_increment


def _set(reps: int, percentage: float, amrap: bool = False) -> SetPrescription:
    return SetPrescription(reps=reps, percentage=percentage, amrap=amrap)


def _sets(count: int, reps: int, percentage: float) -> tuple[SetPrescription, ...]:
    return tuple(_set(reps, percentage) for _ in range(count))


# Linear - 6 weeks, working sets ramp from 72.5% to a 102.5% AMRAP test
WEEK_LINEAR: dict[int, WeekSets] = {
    1: WeekSets(heavy=_sets(3, 5, 72.5), light=_sets(3, 5, 60)),
    2: WeekSets(heavy=_sets(3, 5, 77.5), light=_sets(3, 5, 62.5)),
    3: WeekSets(heavy=_sets(4, 3, 82.5), light=_sets(3, 5, 65)),
    4: WeekSets(heavy=_sets(3, 3, 87.5), light=_sets(3, 5, 65)),
    5: WeekSets(heavy=_sets(3, 2, 92.5), light=_sets(3, 3, 70)),
    6: WeekSets(
        heavy=(
            _set(3, 80),
            _set(2, 90),
            _set(1, 95),
            _set(1, 102.5, amrap=True),
        ),
        light=_sets(2, 3, 60),
    ),
}

# 5/3/1 - 5s week, 3s week, 5/3/1 week, then a light recovery week
WEEK_531: dict[int, WeekSets] = {
    1: WeekSets(
        heavy=(_set(5, 65), _set(5, 75), _set(5, 85, amrap=True)),
        light=_sets(3, 5, 65),
    ),
    2: WeekSets(
        heavy=(_set(3, 70), _set(3, 80), _set(3, 90, amrap=True)),
        light=_sets(3, 5, 60),
    ),
    3: WeekSets(
        heavy=(_set(5, 75), _set(3, 85), _set(1, 95, amrap=True)),
        light=_sets(3, 5, 60),
    ),
    4: WeekSets(
        heavy=(_set(5, 40), _set(5, 50), _set(5, 60)),
        light=_sets(2, 5, 40),
    ),
}

# Block - accumulation (1-3), intensification (4-6), peaking (7), deload (8)
WEEK_BLOCK: dict[int, WeekSets] = {
    1: WeekSets(heavy=_sets(4, 8, 65), light=_sets(3, 8, 55)),
    2: WeekSets(heavy=_sets(4, 8, 67.5), light=_sets(3, 8, 57.5)),
    3: WeekSets(heavy=_sets(4, 8, 70), light=_sets(3, 8, 60)),
    4: WeekSets(heavy=_sets(4, 5, 77.5), light=_sets(3, 5, 62.5)),
    5: WeekSets(heavy=_sets(4, 4, 82.5), light=_sets(3, 5, 65)),
    6: WeekSets(heavy=_sets(4, 3, 87.5), light=_sets(3, 4, 67.5)),
    7: WeekSets(
        heavy=(
            _set(3, 80),
            _set(1, 90),
            _set(1, 95),
            _set(1, 100, amrap=True),
        ),
        light=_sets(2, 3, 60),
    ),
    8: WeekSets(heavy=_sets(3, 5, 50), light=_sets(2, 5, 45)),
}

# Hypertrophy - standalone high-rep block, only reachable by explicit override
WEEK_HYPERTROPHY: dict[int, WeekSets] = {
    1: WeekSets(heavy=_sets(4, 12, 60), light=_sets(3, 15, 50)),
    2: WeekSets(heavy=_sets(4, 10, 65), light=_sets(3, 12, 55)),
    3: WeekSets(
        heavy=(*_sets(3, 8, 70), _set(8, 70, amrap=True)),
        light=_sets(3, 10, 60),
    ),
    4: WeekSets(heavy=_sets(3, 10, 55), light=_sets(2, 12, 45)),
}

SCHEME_TABLES: dict[CycleType, dict[int, WeekSets]] = {
    CycleType.LINEAR: WEEK_LINEAR,
    CycleType.FIVE_THREE_ONE: WEEK_531,
    CycleType.BLOCK: WEEK_BLOCK,
    CycleType.HYPERTROPHY: WEEK_HYPERTROPHY,
}

# Native table length doubles as the scheme's default program duration
SCHEME_NATIVE_WEEKS: dict[CycleType, int] = {
    scheme: len(table) for scheme, table in SCHEME_TABLES.items()
}


def resolve_week_table(scheme: CycleType, week: int) -> WeekSets:
    """Look up the {heavy, light} sets for a scheme-relative week.

    Weeks absent from the table resolve to the table's week 1 entry.
    This is a defaulting policy, not an error path.

    Args:
        scheme: Periodization scheme
        week: Scheme-relative week index (1-based)

    Returns:
        WeekSets for the week, or for week 1 when the week is not tabulated
    """
    table = SCHEME_TABLES[scheme]
    entry = table.get(week)
    if entry is None:
        logger.debug(
            "Week not tabulated, falling back to week 1",
            scheme=scheme.value,
            week=week,
        )
        return table[1]
    return entry


def round_to_increment(value: float, increment: float | None = None) -> float:
    """Round a load to the nearest loadable increment (halves round up).

    Args:
        value: Raw load in kg
        increment: Plate increment; defaults to settings.plate_increment_kg

    Returns:
        Load rounded to a multiple of the increment
    """
    step = increment if increment is not None else settings.plate_increment_kg
    return round(math.floor(value / step + 0.5) * step, 4)


def calculate_working_weight(
    one_rep_max: float,
    percentage: float,
    increment: float | None = None,
) -> float:
    """Compute the loadable weight for a percentage of a max."""
    return round_to_increment(one_rep_max * percentage / 100, increment)


def apply_training_max(
    maxes: Maxes,
    percentage: int,
    increment: float | None = None,
) -> Maxes:
    """Scale true maxes down to a training max.

    The generator never does this implicitly: callers that train off a
    training max apply it before building the profile.

    Args:
        maxes: True one-rep maxes
        percentage: Training max as a share of the true max (90, 95 or 100)
        increment: Plate increment used to round the scaled maxes

    Returns:
        Scaled maxes

    Raises:
        InvalidProfileError: If percentage is not a supported level, the
            increment is not positive, or a scaled max rounds down to 0
    """
    validate_increment(increment)
    if percentage not in VALID_TRAINING_MAX_PERCENTAGES:
        raise InvalidProfileError(
            f"Training max percentage must be one of {sorted(VALID_TRAINING_MAX_PERCENTAGES)}, got {percentage}"
        )
    if percentage == 100:
        return maxes

    try:
        return Maxes(
            squat=calculate_working_weight(maxes.squat, percentage, increment),
            bench=calculate_working_weight(maxes.bench, percentage, increment),
            deadlift=calculate_working_weight(maxes.deadlift, percentage, increment),
        )
    except ValidationError as e:
        raise InvalidProfileError(
            f"Training max {percentage}% leaves no loadable max: {format_validation_error(e)}"
        ) from e
