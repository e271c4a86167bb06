"""Validation functions for generator inputs and outputs.

Inputs are validated fail-fast at the public entry point. Outputs are
checked against the structural invariants of a program tree before they
are handed back to callers.
"""

from collections import Counter
from typing import Any

from pydantic import ValidationError

from powerplan.program.day_split import SUPPORTED_DAYS_PER_WEEK
from powerplan.program.enums import ExperienceTier, Lift
from powerplan.program.errors import InvalidProfileError, ProgramInvariantError
from powerplan.program.types import GeneratedProgram, LifterProfile

SUPPORTED_DURATIONS = {4, 6}


def format_validation_error(error: ValidationError) -> str:
    """Join pydantic errors into one "field: message" line."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        message = item["msg"].removeprefix("Value error, ")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


def parse_profile(data: dict[str, Any]) -> LifterProfile:
    """Build a LifterProfile from raw upstream data.

    Args:
        data: Profile dictionary (e.g., loaded from profile storage)

    Returns:
        Validated LifterProfile

    Raises:
        InvalidProfileError: If any field is missing or out of range
    """
    try:
        return LifterProfile.model_validate(data)
    except ValidationError as e:
        raise InvalidProfileError(f"Invalid lifter profile: {format_validation_error(e)}") from e


def validate_increment(increment: float | None) -> None:
    """Reject a plate increment override that cannot round a load.

    None means the configured default, which settings already validated.

    Raises:
        InvalidProfileError: If the increment is zero or negative
    """
    if increment is not None and increment <= 0:
        raise InvalidProfileError(f"Plate increment must be positive, got {increment}")


def validate_profile(profile: LifterProfile) -> None:
    """Re-check a profile at the generator entry point.

    Profiles built with model_construct skip pydantic validation, so the
    generator does not trust the type alone.

    Args:
        profile: Lifter profile to validate

    Raises:
        InvalidProfileError: If the profile violates any rule
    """
    if profile.experience not in set(ExperienceTier):
        raise InvalidProfileError(f"Unknown experience tier '{profile.experience}'")

    for lift in Lift:
        value = getattr(profile.current_maxes, lift.value, None)
        if not isinstance(value, (int, float)) or value <= 0:
            raise InvalidProfileError(f"{lift.value} max must be positive, got {value}")

    if profile.days_per_week not in SUPPORTED_DAYS_PER_WEEK:
        raise InvalidProfileError(
            f"days_per_week must be one of {sorted(SUPPORTED_DAYS_PER_WEEK)}, got {profile.days_per_week}"
        )

    if profile.duration_weeks is not None and profile.duration_weeks not in SUPPORTED_DURATIONS:
        raise InvalidProfileError(
            f"duration_weeks must be one of {sorted(SUPPORTED_DURATIONS)}, got {profile.duration_weeks}"
        )

    if profile.priority_lift not in set(Lift):
        raise InvalidProfileError(f"Unknown priority lift '{profile.priority_lift}'")


def validate_program(
    program: GeneratedProgram,
    days_per_week: int,
    priority_lift: Lift,
) -> None:
    """Validate the structure of a generated program.

    Rules:
    - Week count equals the program duration, numbered 1..N
    - Every week has exactly days_per_week days, numbered 1..N
    - With more than 3 days, the priority lift is primary on strictly
      more days than each other lift

    Args:
        program: Generated program to validate
        days_per_week: Requested training days per week
        priority_lift: Requested priority lift

    Raises:
        ProgramInvariantError: If any rule is violated
    """
    if len(program.weeks) != program.duration:
        raise ProgramInvariantError(f"Expected {program.duration} weeks, got {len(program.weeks)}")

    for i, week in enumerate(program.weeks, start=1):
        if week.week_number != i:
            raise ProgramInvariantError(f"Week number mismatch: expected {i}, got {week.week_number}")

        if len(week.days) != days_per_week:
            raise ProgramInvariantError(
                f"Week {week.week_number} has {len(week.days)} days, expected {days_per_week}"
            )

        for j, day in enumerate(week.days, start=1):
            if day.day_number != j:
                raise ProgramInvariantError(
                    f"Week {week.week_number}: day number mismatch, expected {j}, got {day.day_number}"
                )

        if days_per_week > 3:
            exposures = Counter(day.main_lift for day in week.days)
            priority_count = exposures[priority_lift]
            for lift in Lift:
                if lift != priority_lift and exposures[lift] >= priority_count:
                    raise ProgramInvariantError(
                        f"Week {week.week_number}: priority lift {priority_lift.value} is primary "
                        f"{priority_count}x, {lift.value} {exposures[lift]}x"
                    )
