"""Scheme, goal and duration selection.

Pure lookups from the lifter's tier. Hypertrophy is never selected
automatically; it is only reachable through an explicit override.
"""

from loguru import logger

from powerplan.program.enums import CycleType, ExperienceTier, TrainingGoal
from powerplan.program.errors import UnknownSchemeError
from powerplan.program.percentages import SCHEME_NATIVE_WEEKS

SCHEME_BY_TIER: dict[ExperienceTier, CycleType] = {
    ExperienceTier.UNTRAINED: CycleType.LINEAR,
    ExperienceTier.NOVICE: CycleType.LINEAR,
    ExperienceTier.BEGINNER: CycleType.LINEAR,
    ExperienceTier.INTERMEDIATE: CycleType.FIVE_THREE_ONE,
    ExperienceTier.ADVANCED: CycleType.BLOCK,
    ExperienceTier.ELITE: CycleType.BLOCK,
}

GOAL_BY_TIER: dict[ExperienceTier, TrainingGoal] = {
    ExperienceTier.UNTRAINED: TrainingGoal.GENERAL,
    ExperienceTier.NOVICE: TrainingGoal.GENERAL,
    ExperienceTier.BEGINNER: TrainingGoal.GENERAL,
    ExperienceTier.INTERMEDIATE: TrainingGoal.STRENGTH,
    ExperienceTier.ADVANCED: TrainingGoal.PEAKING,
    ExperienceTier.ELITE: TrainingGoal.PEAKING,
}


def _coerce_scheme(override: CycleType | str) -> CycleType:
    if isinstance(override, CycleType):
        return override
    try:
        return CycleType(str(override).strip().lower())
    except ValueError as e:
        valid = ", ".join(c.value for c in CycleType)
        raise UnknownSchemeError(f"Unknown scheme '{override}'. Valid schemes: {valid}") from e


def select_scheme(
    experience: ExperienceTier,
    override: CycleType | str | None = None,
) -> CycleType:
    """Select the periodization scheme.

    Args:
        experience: Lifter tier
        override: Optional explicit scheme (takes precedence)

    Returns:
        Selected CycleType

    Raises:
        UnknownSchemeError: If the override is not a known scheme
    """
    if override is not None:
        scheme = _coerce_scheme(override)
        logger.info("Selected scheme via explicit override", scheme=scheme.value)
        return scheme

    scheme = SCHEME_BY_TIER[experience]
    logger.debug("Selected scheme from tier", experience=experience.value, scheme=scheme.value)
    return scheme


def select_goal(experience: ExperienceTier) -> TrainingGoal:
    return GOAL_BY_TIER[experience]


def resolve_duration(scheme: CycleType, requested: int | None) -> int:
    """Use the requested duration when given, else the scheme's native length."""
    if requested is not None:
        return requested
    return SCHEME_NATIVE_WEEKS[scheme]
