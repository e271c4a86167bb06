"""Internal immutable building blocks of the generator.

These never leave the composition engine; callers only see the
pydantic models in powerplan.program.types.
"""

from dataclasses import dataclass

from powerplan.program.enums import Lift
from powerplan.program.types import SetPrescription


# -----------------------------
# Percentage Tables
# -----------------------------
@dataclass(frozen=True)
class WeekSets:
    """Immutable table entry for one scheme-relative week.

    Attributes:
        heavy: Set group for the day's primary lift
        light: Set group for the day's secondary lift
    """

    heavy: tuple[SetPrescription, ...]
    light: tuple[SetPrescription, ...]


# -----------------------------
# Weekly Structure
# -----------------------------
@dataclass(frozen=True)
class DaySplit:
    """Immutable pairing of the heavily and lightly loaded lift of a day.

    Attributes:
        primary: Lift trained with the heavy set group
        secondary: Lift trained with the light set group
    """

    primary: Lift
    secondary: Lift
