"""Canonical enums for program generation.

All enums are string-based so generated programs serialize to JSON
without custom encoders.
"""

from enum import StrEnum


# -----------------------------
# Lifts
# -----------------------------
class Lift(StrEnum):
    """The three competition lifts."""

    SQUAT = "squat"
    BENCH = "bench"
    DEADLIFT = "deadlift"


class ExerciseType(StrEnum):
    """Tag carried by every prescribed exercise."""

    SQUAT = "squat"
    BENCH = "bench"
    DEADLIFT = "deadlift"
    ACCESSORY = "accessory"


# -----------------------------
# Lifter Classification
# -----------------------------
class ExperienceTier(StrEnum):
    """Experience level or strength-standard classification of the lifter."""

    UNTRAINED = "untrained"
    NOVICE = "novice"
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


# -----------------------------
# Periodization
# -----------------------------
class CycleType(StrEnum):
    """Periodization scheme backing a generated program."""

    LINEAR = "linear"
    FIVE_THREE_ONE = "531"
    BLOCK = "block"
    HYPERTROPHY = "hypertrophy"


class TrainingGoal(StrEnum):
    """Goal label attached to a program (metadata only)."""

    GENERAL = "general"
    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    PEAKING = "peaking"
