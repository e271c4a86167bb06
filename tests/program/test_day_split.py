"""Tests for the weekly day split.

Tests verify that:
- Three days rotate every lift through the primary slot once
- Extra days go to the priority lift, paired with the other lifts in order
- The priority lift is primary strictly more often than the others
- Unsupported day counts are rejected
"""

from collections import Counter

import pytest

from powerplan.program.day_split import BASE_SPLIT, get_day_splits
from powerplan.program.enums import Lift
from powerplan.program.errors import InvalidProfileError
from powerplan.program.models import DaySplit


def test_three_day_split_is_base_rotation() -> None:
    """Priority has no effect at three days."""
    for lift in Lift:
        assert get_day_splits(3, lift) == list(BASE_SPLIT)


def test_base_rotation_order() -> None:
    """Squat/Bench, Bench/Deadlift, Deadlift/Squat."""
    assert [(s.primary, s.secondary) for s in BASE_SPLIT] == [
        (Lift.SQUAT, Lift.BENCH),
        (Lift.BENCH, Lift.DEADLIFT),
        (Lift.DEADLIFT, Lift.SQUAT),
    ]


def test_four_day_split_adds_priority_day() -> None:
    """Day 4 pairs the priority lift with the first other lift."""
    splits = get_day_splits(4, Lift.SQUAT)
    assert len(splits) == 4
    assert splits[3] == DaySplit(primary=Lift.SQUAT, secondary=Lift.BENCH)


def test_five_day_split_bench_priority() -> None:
    """Days 4 and 5 are bench-primary, paired with squat then deadlift."""
    splits = get_day_splits(5, Lift.BENCH)
    assert len(splits) == 5
    assert splits[3] == DaySplit(primary=Lift.BENCH, secondary=Lift.SQUAT)
    assert splits[4] == DaySplit(primary=Lift.BENCH, secondary=Lift.DEADLIFT)


@pytest.mark.parametrize("days", [4, 5])
@pytest.mark.parametrize("priority", list(Lift))
def test_priority_lift_dominates(days: int, priority: Lift) -> None:
    """The priority lift is primary on strictly more days than any other lift."""
    counts = Counter(split.primary for split in get_day_splits(days, priority))
    for lift in Lift:
        if lift != priority:
            assert counts[priority] > counts[lift]


@pytest.mark.parametrize("days", [4, 5])
def test_extra_days_never_pair_lift_with_itself(days: int) -> None:
    """Primary and secondary always differ."""
    for priority in Lift:
        for split in get_day_splits(days, priority):
            assert split.primary != split.secondary


@pytest.mark.parametrize("days", [0, 2, 6, 7])
def test_unsupported_days_rejected(days: int) -> None:
    """Only 3, 4 and 5 days are supported."""
    with pytest.raises(InvalidProfileError, match="days_per_week"):
        get_day_splits(days, Lift.SQUAT)
