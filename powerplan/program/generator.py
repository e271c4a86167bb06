"""Periodized program generation.

This module composes the percentage tables into a complete program:
1. Validate the profile (fail fast)
2. Select scheme, goal and duration
3. Build the weekly day split
4. Expand every week: table lookup, deload and extra-day set groups,
   concrete weights, accessories
5. Attach names, description, reasoning and expected progress

Every step is a pure function of its inputs. The same profile always
yields the same program, apart from created_at.
"""

from collections import Counter

from powerplan.program.accessories import build_accessories
from powerplan.program.constants import (
    ACCESSORIES_BASE_DAY,
    ACCESSORIES_EXTRA_DAY,
    ACCESSORY_REASON,
    AMRAP_REASON,
    DELOAD_FOCUS,
    DELOAD_LABEL,
    DELOAD_LIGHT_REDUCTION,
    DELOAD_PERCENTAGE_FLOOR,
    EXPECTED_PROGRESS,
    LIFT_NAMES,
    LIFT_SHORT_NAMES,
    MEDIUM_PERCENTAGE_BOOST,
    MEDIUM_PERCENTAGE_CAP,
    SCHEME_DESCRIPTIONS,
    SCHEME_LABELS,
    SCHEME_REASONS,
    WEEK_FOCUS,
    WEEK_LABELS,
)
from powerplan.program.day_split import BASE_SPLIT, get_day_splits
from powerplan.program.enums import CycleType, ExerciseType, ExperienceTier, Lift
from powerplan.program.formatting import format_load
from powerplan.program.models import DaySplit, WeekSets
from powerplan.program.observability import GeneratorStage, log_event, stage_timer
from powerplan.program.percentages import SCHEME_TABLES, calculate_working_weight, resolve_week_table
from powerplan.program.selection import resolve_duration, select_goal, select_scheme
from powerplan.program.types import (
    DayPrescription,
    ExercisePrescription,
    ExpectedProgress,
    GeneratedProgram,
    LifterProfile,
    Maxes,
    ProgramRecommendation,
    SetPrescription,
    WeekPrescription,
)
from powerplan.program.validators import validate_increment, validate_profile, validate_program
from powerplan.program.week_mapping import is_deload_week, map_program_week


# -----------------------------
# Set Groups
# -----------------------------
def get_deload_sets(week_sets: WeekSets) -> WeekSets:
    """Deload pair: the light group in the heavy slot, a lighter copy in the light slot."""
    reduced = tuple(
        s.model_copy(
            update={"percentage": max(s.percentage - DELOAD_LIGHT_REDUCTION, DELOAD_PERCENTAGE_FLOOR)}
        )
        for s in week_sets.light
    )
    return WeekSets(heavy=week_sets.light, light=reduced)


def get_medium_sets(week_sets: WeekSets) -> WeekSets:
    """Extra-day pair: light reps with a +5 point bump (capped at 80%), light unchanged."""
    boosted = tuple(
        s.model_copy(
            update={"percentage": min(s.percentage + MEDIUM_PERCENTAGE_BOOST, MEDIUM_PERCENTAGE_CAP)}
        )
        for s in week_sets.light
    )
    return WeekSets(heavy=boosted, light=week_sets.light)


def _weighted_sets(
    sets: tuple[SetPrescription, ...],
    one_rep_max: float,
    increment: float | None,
) -> list[SetPrescription]:
    return [
        s.model_copy(update={"weight": calculate_working_weight(one_rep_max, s.percentage, increment)})
        for s in sets
    ]


def _main_exercise(
    lift: Lift,
    sets: tuple[SetPrescription, ...],
    maxes: Maxes,
    increment: float | None,
) -> ExercisePrescription:
    return ExercisePrescription(
        name=LIFT_NAMES[lift],
        type=ExerciseType(lift.value),
        sets=_weighted_sets(sets, maxes.for_lift(lift), increment),
    )


# -----------------------------
# Days & Weeks
# -----------------------------
def generate_day(
    day_number: int,
    split: DaySplit,
    week_sets: WeekSets,
    maxes: Maxes,
    occurrence: int,
    is_extra_day: bool,
    is_deload: bool,
    increment: float | None = None,
) -> DayPrescription:
    """Build one training day.

    Args:
        day_number: 1-based day index within the week
        split: Primary/secondary lift pairing
        week_sets: Set groups for this day (already deload/medium adjusted)
        maxes: Maxes used for weights
        occurrence: Times the primary lift was already primary this week
        is_extra_day: Bonus day beyond the base three-day rotation
        is_deload: Whether the week is a deload week
        increment: Plate increment override

    Returns:
        DayPrescription with primary, secondary and accessory exercises
    """
    exercises = [
        _main_exercise(split.primary, week_sets.heavy, maxes, increment),
        _main_exercise(split.secondary, week_sets.light, maxes, increment),
    ]
    accessory_count = ACCESSORIES_EXTRA_DAY if is_extra_day else ACCESSORIES_BASE_DAY
    exercises.extend(build_accessories(split.primary, occurrence, accessory_count, is_deload))

    return DayPrescription(
        day_number=day_number,
        name=f"Jour {day_number} - {LIFT_NAMES[split.primary]} + {LIFT_NAMES[split.secondary]}",
        main_lift=split.primary,
        exercises=exercises,
    )


def get_week_name(scheme: CycleType, week_number: int, table_week: int, is_deload: bool) -> str:
    labels = WEEK_LABELS[scheme]
    label = DELOAD_LABEL if is_deload else labels.get(table_week, labels[1])
    return f"Semaine {week_number} - {label}"


def get_week_focus(scheme: CycleType, table_week: int, is_deload: bool) -> str:
    if is_deload:
        return DELOAD_FOCUS
    focus = WEEK_FOCUS[scheme]
    return focus.get(table_week, focus[1])


def generate_week(
    week_number: int,
    scheme: CycleType,
    duration: int,
    splits: list[DaySplit],
    maxes: Maxes,
    increment: float | None = None,
) -> WeekPrescription:
    """Expand one program week into its days.

    The first three days use the week's full heavy/light pair; bonus days
    use the medium pair so the priority lift gains volume without a second
    top-intensity session.
    """
    is_deload = is_deload_week(week_number, duration)
    table_week = map_program_week(scheme, week_number, duration)
    week_sets = resolve_week_table(scheme, table_week)
    if is_deload:
        week_sets = get_deload_sets(week_sets)
    medium_sets = get_medium_sets(week_sets)

    occurrences: Counter[Lift] = Counter()
    days: list[DayPrescription] = []
    for index, split in enumerate(splits):
        is_extra_day = index >= len(BASE_SPLIT)
        days.append(
            generate_day(
                day_number=index + 1,
                split=split,
                week_sets=medium_sets if is_extra_day else week_sets,
                maxes=maxes,
                occurrence=occurrences[split.primary],
                is_extra_day=is_extra_day,
                is_deload=is_deload,
                increment=increment,
            )
        )
        occurrences[split.primary] += 1

    return WeekPrescription(
        week_number=week_number,
        name=get_week_name(scheme, week_number, table_week, is_deload),
        is_deload=is_deload,
        days=days,
        focus=get_week_focus(scheme, table_week, is_deload),
    )


# -----------------------------
# Text & Metadata
# -----------------------------
def get_program_name(scheme: CycleType, duration: int, days_per_week: int) -> str:
    return f"{SCHEME_LABELS[scheme]} {duration}S - {days_per_week}J/sem"


def get_cycle_description(
    scheme: CycleType,
    duration: int,
    days_per_week: int,
    priority_lift: Lift,
) -> str:
    extra_days = days_per_week - len(BASE_SPLIT)
    focus = (
        f" Focus {LIFT_SHORT_NAMES[priority_lift]} avec {extra_days} jour(s) supplémentaire(s)."
        if extra_days > 0
        else ""
    )
    return f"{SCHEME_DESCRIPTIONS[scheme]} {days_per_week} jours/semaine sur {duration} semaines.{focus}"


def get_expected_progress(scheme: CycleType) -> ExpectedProgress:
    gains = EXPECTED_PROGRESS[scheme]
    return ExpectedProgress(
        squat=gains[Lift.SQUAT],
        bench=gains[Lift.BENCH],
        deadlift=gains[Lift.DEADLIFT],
    )


def get_reasonings(
    scheme: CycleType,
    duration: int,
    days_per_week: int,
    priority_lift: Lift,
    expected_progress: ExpectedProgress,
) -> list[str]:
    priority_name = LIFT_SHORT_NAMES[priority_lift]
    reasons: list[str] = []

    if days_per_week == 3:
        reasons.append("Chaque mouvement est travaillé 2x/semaine (1 session lourde + 1 session légère).")
    elif days_per_week == 4:
        reasons.append(f"{priority_name} travaillé 3x/semaine dont 2 sessions lourdes.")
    else:
        reasons.append(f"{priority_name} travaillé 4x/semaine pour un focus maximal.")

    reasons.append(SCHEME_REASONS[scheme])

    has_amrap = any(s.amrap for week in SCHEME_TABLES[scheme].values() for s in week.heavy)
    if has_amrap:
        reasons.append(AMRAP_REASON)

    reasons.append(ACCESSORY_REASON)
    reasons.append(
        f"Progression: +{format_load(expected_progress.squat)}kg squat/"
        f"+{format_load(expected_progress.deadlift)}kg deadlift, "
        f"+{format_load(expected_progress.bench)}kg bench par cycle de {duration} semaines."
    )
    return reasons


# -----------------------------
# Entry Point
# -----------------------------
def generate_program(
    profile: LifterProfile,
    scheme: CycleType | str | None = None,
    increment: float | None = None,
) -> ProgramRecommendation:
    """Generate a complete periodized program for a lifter.

    Args:
        profile: Lifter profile (maxes already scaled to a training max if
            the caller trains off one)
        scheme: Optional explicit scheme; overrides tier-based selection
        increment: Optional plate increment; defaults to settings

    Returns:
        ProgramRecommendation with program tree, reasoning and expected progress

    Raises:
        InvalidProfileError: If the profile or the increment is invalid
        UnknownSchemeError: If the scheme override is unknown
    """
    with stage_timer(GeneratorStage.PROFILE):
        validate_profile(profile)
        validate_increment(increment)
        experience = ExperienceTier(profile.experience)
        priority_lift = Lift(profile.priority_lift)
        days_per_week = profile.days_per_week

    with stage_timer(GeneratorStage.SCHEME) as meta:
        cycle_type = select_scheme(experience, scheme)
        goal = select_goal(experience)
        duration = resolve_duration(cycle_type, profile.duration_weeks)
        meta.update(scheme=cycle_type.value, duration=duration)

    with stage_timer(GeneratorStage.SPLIT) as meta:
        splits = get_day_splits(days_per_week, priority_lift)
        meta["days"] = len(splits)

    with stage_timer(GeneratorStage.WEEKS) as meta:
        weeks = [
            generate_week(
                week_number=week_number,
                scheme=cycle_type,
                duration=duration,
                splits=splits,
                maxes=profile.current_maxes,
                increment=increment,
            )
            for week_number in range(1, duration + 1)
        ]
        meta["deload_weeks"] = sum(week.is_deload for week in weeks)

    with stage_timer(GeneratorStage.RECOMMENDATION):
        program = GeneratedProgram(
            name=get_program_name(cycle_type, duration, days_per_week),
            type=cycle_type,
            goal=goal,
            duration=duration,
            maxes=profile.current_maxes,
            weeks=weeks,
            description=get_cycle_description(cycle_type, duration, days_per_week, priority_lift),
        )
        validate_program(program, days_per_week, priority_lift)

        expected_progress = get_expected_progress(cycle_type)
        recommendation = ProgramRecommendation(
            program=program,
            reasoning=get_reasonings(cycle_type, duration, days_per_week, priority_lift, expected_progress),
            expected_progress=expected_progress,
        )

    log_event(
        "program_generated",
        scheme=cycle_type.value,
        goal=goal.value,
        duration=duration,
        days_per_week=days_per_week,
        priority_lift=priority_lift.value,
    )

    return recommendation
