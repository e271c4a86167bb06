"""Tests for scheme, goal and duration selection."""

import pytest

from powerplan.program.enums import CycleType, ExperienceTier, TrainingGoal
from powerplan.program.errors import UnknownSchemeError
from powerplan.program.selection import resolve_duration, select_goal, select_scheme


@pytest.mark.parametrize(
    ("experience", "scheme", "goal"),
    [
        (ExperienceTier.UNTRAINED, CycleType.LINEAR, TrainingGoal.GENERAL),
        (ExperienceTier.NOVICE, CycleType.LINEAR, TrainingGoal.GENERAL),
        (ExperienceTier.BEGINNER, CycleType.LINEAR, TrainingGoal.GENERAL),
        (ExperienceTier.INTERMEDIATE, CycleType.FIVE_THREE_ONE, TrainingGoal.STRENGTH),
        (ExperienceTier.ADVANCED, CycleType.BLOCK, TrainingGoal.PEAKING),
        (ExperienceTier.ELITE, CycleType.BLOCK, TrainingGoal.PEAKING),
    ],
)
def test_tier_selection(experience: ExperienceTier, scheme: CycleType, goal: TrainingGoal) -> None:
    """Each tier maps to one scheme and one goal."""
    assert select_scheme(experience) == scheme
    assert select_goal(experience) == goal


def test_hypertrophy_never_selected_by_tier() -> None:
    """Hypertrophy is reachable only through an override."""
    assert CycleType.HYPERTROPHY not in {select_scheme(tier) for tier in ExperienceTier}


def test_override_takes_precedence() -> None:
    """An explicit scheme wins over the tier."""
    assert select_scheme(ExperienceTier.NOVICE, CycleType.BLOCK) == CycleType.BLOCK
    assert select_scheme(ExperienceTier.ELITE, "hypertrophy") == CycleType.HYPERTROPHY


def test_override_string_is_normalized() -> None:
    """Override strings are trimmed and case-insensitive."""
    assert select_scheme(ExperienceTier.NOVICE, " Block ") == CycleType.BLOCK
    assert select_scheme(ExperienceTier.NOVICE, "531") == CycleType.FIVE_THREE_ONE


def test_unknown_override_rejected() -> None:
    """Unknown schemes raise instead of silently falling back."""
    with pytest.raises(UnknownSchemeError, match="Unknown scheme 'conjugate'"):
        select_scheme(ExperienceTier.INTERMEDIATE, "conjugate")


@pytest.mark.parametrize(
    ("scheme", "expected"),
    [
        (CycleType.LINEAR, 6),
        (CycleType.FIVE_THREE_ONE, 4),
        (CycleType.BLOCK, 8),
        (CycleType.HYPERTROPHY, 4),
    ],
)
def test_default_duration_is_native_length(scheme: CycleType, expected: int) -> None:
    """Without a request, the scheme's own length is used."""
    assert resolve_duration(scheme, None) == expected


def test_requested_duration_wins() -> None:
    """A requested duration replaces the native length."""
    assert resolve_duration(CycleType.BLOCK, 4) == 4
    assert resolve_duration(CycleType.FIVE_THREE_ONE, 6) == 6
