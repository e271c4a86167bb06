"""Accessory selection for training days.

Accessories are prescribed-but-untracked tool exercises tied to the
day's primary lift. Selection is deterministic and stateless: the n-th
time a lift is primary within a week, the pool is read starting at
offset n * count, wrapping around.

The pools file is read once per process; later lookups hit the cache.
"""

from functools import cache
from pathlib import Path

import yaml

from powerplan.program.constants import (
    ACCESSORY_DELOAD_NOTE,
    ACCESSORY_NOTE,
    ACCESSORY_SETS_DELOAD,
    ACCESSORY_SETS_NORMAL,
)
from powerplan.program.enums import ExerciseType, Lift
from powerplan.program.errors import ProgramGeneratorError
from powerplan.program.types import ExercisePrescription, SetPrescription

_POOLS_PATH = Path(__file__).parent.parent / "data" / "accessories.yaml"

# Accessories carry no load: the percentage is a placeholder
_ACCESSORY_PERCENTAGE = 0


@cache
def load_accessory_pools() -> dict[Lift, tuple[str, ...]]:
    """Load per-lift accessory pools from the bundled YAML file (cached).

    Returns:
        Mapping of lift to its ordered accessory names

    Raises:
        ProgramGeneratorError: If the file is missing or malformed
    """
    if not _POOLS_PATH.exists():
        raise ProgramGeneratorError(f"Accessory pools not found: {_POOLS_PATH}")

    with _POOLS_PATH.open(encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ProgramGeneratorError("Invalid accessory pools format")

    pools: dict[Lift, tuple[str, ...]] = {}
    for lift in Lift:
        names = raw.get(lift.value)
        if not isinstance(names, list) or not names:
            raise ProgramGeneratorError(f"No accessory pool for lift '{lift.value}'")
        pools[lift] = tuple(str(name) for name in names)

    return pools


def select_accessory_names(lift: Lift, occurrence: int, count: int) -> list[str]:
    """Pick `count` accessory names for the `occurrence`-th primary slot of a lift."""
    pool = load_accessory_pools()[lift]
    start = occurrence * count
    return [pool[(start + i) % len(pool)] for i in range(count)]


def build_accessories(
    lift: Lift,
    occurrence: int,
    count: int,
    is_deload: bool,
) -> list[ExercisePrescription]:
    """Build fixed-structure accessory prescriptions.

    Args:
        lift: Primary lift of the day
        occurrence: How many times this lift was already primary this week
        count: Number of accessories to prescribe
        is_deload: Deload weeks use fewer, lighter sets

    Returns:
        List of accessory ExercisePrescription (no weights attached)
    """
    set_count, reps, rpe = ACCESSORY_SETS_DELOAD if is_deload else ACCESSORY_SETS_NORMAL
    note = ACCESSORY_DELOAD_NOTE if is_deload else ACCESSORY_NOTE

    return [
        ExercisePrescription(
            name=name,
            type=ExerciseType.ACCESSORY,
            sets=[
                SetPrescription(reps=reps, percentage=_ACCESSORY_PERCENTAGE, rpe=rpe)
                for _ in range(set_count)
            ],
            notes=note,
            is_tool_exercise=True,
        )
        for name in select_accessory_names(lift, occurrence, count)
    ]
