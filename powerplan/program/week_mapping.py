"""Program-week to table-week remapping.

A lifter may pick a cycle length different from the native length of a
scheme's table. Rather than deriving the mapping arithmetically, every
reachable (duration, scheme) combination is spelled out below: the
position in each tuple is the program week, the value is the table week.
"""

from loguru import logger

from powerplan.program.enums import CycleType

WEEK_MAPPINGS: dict[tuple[int, CycleType], tuple[int, ...]] = {
    # Linear (native 6 weeks)
    (4, CycleType.LINEAR): (1, 3, 5, 6),
    (6, CycleType.LINEAR): (1, 2, 3, 4, 5, 6),
    # 5/3/1 (native 4 weeks)
    (4, CycleType.FIVE_THREE_ONE): (1, 2, 3, 4),
    (6, CycleType.FIVE_THREE_ONE): (1, 1, 2, 2, 3, 4),
    # Block (native 8 weeks)
    (4, CycleType.BLOCK): (1, 4, 7, 8),
    (6, CycleType.BLOCK): (1, 3, 4, 6, 7, 8),
    (8, CycleType.BLOCK): (1, 2, 3, 4, 5, 6, 7, 8),
    # Hypertrophy (native 4 weeks)
    (4, CycleType.HYPERTROPHY): (1, 2, 3, 4),
    (6, CycleType.HYPERTROPHY): (1, 1, 2, 2, 3, 4),
}

# (duration, week) pairs that are deload weeks
DELOAD_WEEKS: frozenset[tuple[int, int]] = frozenset({(4, 4), (6, 6)})


def map_program_week(scheme: CycleType, week: int, duration: int) -> int:
    """Map a program week to the scheme's table week.

    Args:
        scheme: Periodization scheme
        week: Program-relative week (1-based)
        duration: Program duration in weeks

    Returns:
        Scheme-relative table week. Unmapped combinations return the
        program week unchanged; the table lookup then applies its own
        week-1 fallback.
    """
    mapping = WEEK_MAPPINGS.get((duration, scheme))
    if mapping is None or not 1 <= week <= len(mapping):
        logger.debug(
            "No week mapping, using program week as table week",
            scheme=scheme.value,
            week=week,
            duration=duration,
        )
        return week
    return mapping[week - 1]


def is_deload_week(week: int, duration: int) -> bool:
    """Return True for the closing week of a 4- or 6-week program."""
    return (duration, week) in DELOAD_WEEKS
