"""Canonical program schema.

These models are the boundary contract of the generator:
- LifterProfile is the only input
- ProgramRecommendation is the only output
- DayPrescription is what travels across the session-launch boundary

Generated models are frozen: any parameter change means regenerating
the whole program, never patching it.
"""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from powerplan.program.enums import CycleType, ExerciseType, ExperienceTier, Lift, TrainingGoal

DaysPerWeek = Literal[3, 4, 5]
DurationWeeks = Literal[4, 6]


class Maxes(BaseModel):
    """Current one-rep maxes in kilograms."""

    model_config = ConfigDict(frozen=True)

    squat: float
    bench: float
    deadlift: float

    @field_validator("squat", "bench", "deadlift")
    @classmethod
    def validate_positive(cls, value: float, info: ValidationInfo) -> float:
        """Reject maxes that would produce zero or negative loads."""
        if value <= 0:
            raise ValueError(f"{info.field_name} max must be positive")
        return value

    def for_lift(self, lift: Lift) -> float:
        return getattr(self, lift.value)


class LifterProfile(BaseModel):
    """Immutable generator input.

    Attributes:
        experience: Experience tier or strength-level classification
        current_maxes: One-rep maxes used as percentage basis
        days_per_week: Training days per week (3, 4 or 5)
        duration_weeks: Requested cycle length; None means scheme default
        priority_lift: Lift that receives the extra weekly exposures
        bodyweight: Lifter bodyweight (metadata only)
    """

    model_config = ConfigDict(frozen=True)

    experience: ExperienceTier
    current_maxes: Maxes
    days_per_week: DaysPerWeek = 3
    duration_weeks: DurationWeeks | None = None
    priority_lift: Lift = Lift.SQUAT
    bodyweight: float | None = Field(default=None, gt=0)


class SetPrescription(BaseModel):
    """One prescribed set.

    Attributes:
        reps: Target repetitions (lower bound for AMRAP sets)
        percentage: Percentage of the lift's max; may exceed 100 on test weeks
        weight: Concrete load in kg, absent for accessories
        rpe: Optional effort rating
        amrap: Whether the set is taken to "as many reps as possible"
    """

    model_config = ConfigDict(frozen=True)

    reps: int = Field(..., gt=0)
    percentage: float
    weight: float | None = None
    rpe: float | None = None
    amrap: bool = False


class ExercisePrescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: ExerciseType
    sets: list[SetPrescription]
    notes: str | None = None
    is_tool_exercise: bool = False


class DayPrescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    day_number: int = Field(..., ge=1)
    name: str
    main_lift: Lift
    exercises: list[ExercisePrescription]


class WeekPrescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    week_number: int = Field(..., ge=1)
    name: str
    is_deload: bool
    days: list[DayPrescription]
    focus: str


class GeneratedProgram(BaseModel):
    """Complete multi-week prescription tree.

    created_at is the only non-deterministic field; callers comparing
    programs should exclude it.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: CycleType
    goal: TrainingGoal
    duration: int
    maxes: Maxes
    weeks: list[WeekPrescription]
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    description: str


class ExpectedProgress(BaseModel):
    """Expected kg gained per lift over one completed cycle."""

    model_config = ConfigDict(frozen=True)

    squat: float
    bench: float
    deadlift: float


class ProgramRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    program: GeneratedProgram
    reasoning: list[str]
    expected_progress: ExpectedProgress


class ProgramProgress(BaseModel):
    """Persisted "where am I" pointer into a program (1-based)."""

    model_config = ConfigDict(frozen=True)

    current_week: int = Field(default=1, ge=1)
    current_day: int = Field(default=1, ge=1)


# -----------------------------
# Workout Draft (session launch)
# -----------------------------
class DraftSet(BaseModel):
    """Editable logged set pre-filled from its prescription."""

    weight: float = 0.0
    reps: int = 0
    completed: bool = False
    target_weight: float = 0.0
    target_reps: int = 0


class DraftExercise(BaseModel):
    type: ExerciseType
    name: str
    is_tool_exercise: bool = False
    sets: list[DraftSet]


class WorkoutDraft(BaseModel):
    """Editable workout log built from a launched day.

    Unlike generated models, drafts are mutable: the logging flow edits
    weights, reps and completion in place.
    """

    title: str
    week_number: int
    day_number: int
    total_weeks: int
    days_per_week: int
    exercises: list[DraftExercise]
