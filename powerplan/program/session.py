"""Session launch: carry one day across the navigation boundary.

A launched day is serialized to JSON, decoded on the other side and
turned into an editable workout draft whose sets are pre-filled with
their prescribed targets.
"""

from pydantic import ValidationError

from powerplan.program.enums import ExerciseType
from powerplan.program.errors import InvalidSessionError
from powerplan.program.progress import get_session
from powerplan.program.types import (
    DayPrescription,
    DraftExercise,
    DraftSet,
    GeneratedProgram,
    ProgramProgress,
    WorkoutDraft,
)


def serialize_day(day: DayPrescription) -> str:
    return day.model_dump_json()


def deserialize_day(payload: str) -> DayPrescription:
    """Decode a day preset.

    Raises:
        InvalidSessionError: If the payload is not a valid day prescription
    """
    try:
        return DayPrescription.model_validate_json(payload)
    except ValidationError as e:
        raise InvalidSessionError(f"Invalid day preset: {e.error_count()} error(s)") from e


def build_workout_draft(
    day: DayPrescription,
    week_number: int,
    total_weeks: int,
    days_per_week: int,
) -> WorkoutDraft:
    """Turn a prescribed day into an editable workout log.

    Each set starts with the prescribed load pre-filled, zero reps logged
    and not completed. Unloaded sets (accessories) target 0 kg.

    Args:
        day: Prescribed day
        week_number: Program week the day belongs to
        total_weeks: Program length, used to advance progress after logging
        days_per_week: Days in the program week

    Returns:
        WorkoutDraft ready for editing
    """
    exercises = []
    for exercise in day.exercises:
        is_tool_exercise = exercise.is_tool_exercise or exercise.type == ExerciseType.ACCESSORY
        exercises.append(
            DraftExercise(
                type=exercise.type,
                name=exercise.name,
                is_tool_exercise=is_tool_exercise,
                sets=[
                    DraftSet(
                        weight=s.weight or 0.0,
                        reps=0,
                        completed=False,
                        target_weight=s.weight or 0.0,
                        target_reps=s.reps,
                    )
                    for s in exercise.sets
                ],
            )
        )

    return WorkoutDraft(
        title=day.name,
        week_number=week_number,
        day_number=day.day_number,
        total_weeks=total_weeks,
        days_per_week=days_per_week,
        exercises=exercises,
    )


def launch_session(program: GeneratedProgram, progress: ProgramProgress) -> WorkoutDraft:
    """Build the draft for the day the progress pointer refers to."""
    week, day = get_session(program, progress)
    return build_workout_draft(
        day=day,
        week_number=week.week_number,
        total_weeks=len(program.weeks),
        days_per_week=len(week.days),
    )
