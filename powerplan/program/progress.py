"""Progress pointers into a generated program.

The persisted pointer is a (week, day) pair. Programs are regenerated
whenever settings change, so a stored pointer may outrun the current
tree; lookups clamp it to the last available week and day.
"""

from loguru import logger

from powerplan.program.errors import InvalidProgressError
from powerplan.program.types import DayPrescription, GeneratedProgram, ProgramProgress, WeekPrescription


def get_session(
    program: GeneratedProgram,
    progress: ProgramProgress,
) -> tuple[WeekPrescription, DayPrescription]:
    """Resolve the week and day a progress pointer refers to.

    Args:
        program: Generated program
        progress: Stored (current_week, current_day) pointer

    Returns:
        Tuple of (week, day), clamped into the program

    Raises:
        InvalidProgressError: If the program has no weeks or the week has no days
    """
    if not program.weeks:
        raise InvalidProgressError("Program has no weeks")

    week_index = min(progress.current_week - 1, len(program.weeks) - 1)
    week = program.weeks[week_index]
    if not week.days:
        raise InvalidProgressError(f"Week {week.week_number} has no days")

    day_index = min(progress.current_day - 1, len(week.days) - 1)
    if (week_index, day_index) != (progress.current_week - 1, progress.current_day - 1):
        logger.debug(
            "Progress pointer clamped into program",
            current_week=progress.current_week,
            current_day=progress.current_day,
            week=week_index + 1,
            day=day_index + 1,
        )

    return week, week.days[day_index]


def advance_progress(
    progress: ProgramProgress,
    total_weeks: int,
    days_per_week: int,
) -> ProgramProgress:
    """Move the pointer to the next training day.

    Past the last day of a week the pointer moves to day 1 of the next
    week; past the last week it wraps to week 1 (new cycle).

    Raises:
        InvalidProgressError: If total_weeks or days_per_week is below 1
    """
    if total_weeks < 1 or days_per_week < 1:
        raise InvalidProgressError(
            f"Cannot advance in a program of {total_weeks} weeks x {days_per_week} days"
        )

    next_week = progress.current_week
    next_day = progress.current_day + 1

    if next_day > days_per_week:
        next_day = 1
        next_week = progress.current_week + 1
        if next_week > total_weeks:
            next_week = 1

    return ProgramProgress(current_week=next_week, current_day=next_day)
