"""Display helpers consumed by the rendering layer.

Formatters never raise on incomplete trees; they return an empty string.
"""

from powerplan.program.constants import DELOAD_SUMMARY
from powerplan.program.types import SetPrescription, WeekPrescription


def format_load(value: float | None) -> str:
    """Format a load or percentage without a trailing ".0"."""
    if value is None:
        return ""

    if abs(value - round(value)) < 1e-9:
        return str(int(round(value)))

    return f"{value:.3f}".rstrip("0").rstrip(".")


def format_set_display(set_prescription: SetPrescription) -> str:
    """Render a set as "{reps}{+} @ {weight}kg", or "@ {percentage}%" when unloaded."""
    if set_prescription.weight:
        load = f"{format_load(set_prescription.weight)}kg"
    else:
        load = f"{format_load(set_prescription.percentage)}%"
    amrap = "+" if set_prescription.amrap else ""
    return f"{set_prescription.reps}{amrap} @ {load}"


def format_week_summary(week: WeekPrescription) -> str:
    """Short headline for a week card.

    Deload weeks get a fixed label regardless of their contents. Other
    weeks show the top set of day 1's first exercise.
    """
    if week.is_deload:
        return DELOAD_SUMMARY

    if not week.days or not week.days[0].exercises:
        return ""

    main_sets = week.days[0].exercises[0].sets
    if not main_sets:
        return ""

    top_set = main_sets[-1]
    top_weight = format_load(top_set.weight or 0)
    top_percentage = format_load(top_set.percentage or 0)
    return f"Max: {top_weight}kg ({top_percentage}%)"
