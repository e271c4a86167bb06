"""Weekly day split.

The base three-day rotation puts every lift in the primary slot once.
Fourth and fifth days are bonus exposures for the priority lift, so it
is always primary on strictly more days than the other two lifts.
"""

from powerplan.program.enums import Lift
from powerplan.program.errors import InvalidProfileError
from powerplan.program.models import DaySplit

LIFT_ORDER: tuple[Lift, ...] = (Lift.SQUAT, Lift.BENCH, Lift.DEADLIFT)

BASE_SPLIT: tuple[DaySplit, ...] = (
    DaySplit(primary=Lift.SQUAT, secondary=Lift.BENCH),
    DaySplit(primary=Lift.BENCH, secondary=Lift.DEADLIFT),
    DaySplit(primary=Lift.DEADLIFT, secondary=Lift.SQUAT),
)

SUPPORTED_DAYS_PER_WEEK = {3, 4, 5}


def get_day_splits(days_per_week: int, priority_lift: Lift) -> list[DaySplit]:
    """Build the (primary, secondary) pairs for one training week.

    Args:
        days_per_week: Training days per week (3, 4 or 5)
        priority_lift: Lift that receives the bonus days

    Returns:
        List of DaySplit, one per training day

    Raises:
        InvalidProfileError: If days_per_week is not supported
    """
    if days_per_week not in SUPPORTED_DAYS_PER_WEEK:
        raise InvalidProfileError(
            f"days_per_week must be one of {sorted(SUPPORTED_DAYS_PER_WEEK)}, got {days_per_week}"
        )

    other_lifts = [lift for lift in LIFT_ORDER if lift != priority_lift]
    extra_days = [
        DaySplit(primary=priority_lift, secondary=other)
        for other in other_lifts[: days_per_week - len(BASE_SPLIT)]
    ]

    return [*BASE_SPLIT, *extra_days]
