"""Tests for profile and program validation.

Tests verify that:
- Raw profile data is parsed or rejected with a readable message
- Generated programs pass structural validation
- Broken trees trip the matching invariant
"""

import pytest

from powerplan.program.enums import ExperienceTier, Lift
from powerplan.program.errors import InvalidProfileError, ProgramInvariantError
from powerplan.program.generator import generate_program
from powerplan.program.types import GeneratedProgram, LifterProfile
from powerplan.program.validators import parse_profile, validate_increment, validate_profile, validate_program


def _raw_profile(**overrides) -> dict:
    data = {
        "experience": "intermediate",
        "current_maxes": {"squat": 150, "bench": 100, "deadlift": 180},
        "days_per_week": 4,
        "priority_lift": "deadlift",
    }
    data.update(overrides)
    return data


def test_parse_profile_accepts_raw_strings() -> None:
    """Enum fields are parsed from their string values."""
    profile = parse_profile(_raw_profile())
    assert profile.experience == ExperienceTier.INTERMEDIATE
    assert profile.priority_lift == Lift.DEADLIFT
    assert profile.days_per_week == 4
    assert profile.duration_weeks is None


def test_parse_profile_defaults() -> None:
    """Days default to 3 and priority to squat."""
    profile = parse_profile({"experience": "novice", "current_maxes": {"squat": 60, "bench": 40, "deadlift": 80}})
    assert profile.days_per_week == 3
    assert profile.priority_lift == Lift.SQUAT


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"current_maxes": {"squat": 0, "bench": 100, "deadlift": 180}}, "squat max must be positive"),
        ({"current_maxes": {"squat": 150, "bench": -5, "deadlift": 180}}, "bench max must be positive"),
        ({"days_per_week": 6}, "days_per_week"),
        ({"duration_weeks": 8}, "duration_weeks"),
        ({"experience": "legend"}, "experience"),
        ({"priority_lift": "clean"}, "priority_lift"),
        ({"bodyweight": 0}, "bodyweight"),
    ],
)
def test_parse_profile_rejects_invalid(overrides: dict, message: str) -> None:
    """Invalid fields surface as InvalidProfileError naming the problem."""
    with pytest.raises(InvalidProfileError, match=message):
        parse_profile(_raw_profile(**overrides))


def test_parse_profile_error_has_no_pydantic_prefix() -> None:
    """Custom validator messages are reported without 'Value error, '."""
    with pytest.raises(InvalidProfileError) as exc_info:
        parse_profile(_raw_profile(current_maxes={"squat": 0, "bench": 100, "deadlift": 180}))
    assert "Value error" not in str(exc_info.value)
    assert str(exc_info.value).startswith("Invalid lifter profile: ")


def test_validate_profile_accepts_valid(intermediate_profile: LifterProfile) -> None:
    """A validated profile passes the entry check."""
    validate_profile(intermediate_profile)


def test_validate_profile_rejects_constructed_duration(intermediate_profile: LifterProfile) -> None:
    """Unsupported durations smuggled past pydantic are caught."""
    profile = LifterProfile.model_construct(**{**dict(intermediate_profile), "duration_weeks": 5})
    with pytest.raises(InvalidProfileError, match="duration_weeks"):
        validate_profile(profile)


@pytest.fixture
def program(advanced_bench_profile: LifterProfile) -> GeneratedProgram:
    """Six-week, five-day block program with bench priority."""
    return generate_program(advanced_bench_profile).program


def test_validate_program_accepts_generated(program: GeneratedProgram) -> None:
    """Generated programs satisfy every structural rule."""
    validate_program(program, 5, Lift.BENCH)


def test_validate_program_week_count(program: GeneratedProgram) -> None:
    """Missing weeks are detected."""
    broken = program.model_copy(update={"weeks": program.weeks[:-1]})
    with pytest.raises(ProgramInvariantError, match="Expected 6 weeks"):
        validate_program(broken, 5, Lift.BENCH)


def test_validate_program_day_count(program: GeneratedProgram) -> None:
    """A day count different from the request is detected."""
    with pytest.raises(ProgramInvariantError, match="expected 4"):
        validate_program(program, 4, Lift.BENCH)


def test_validate_program_week_numbering(program: GeneratedProgram) -> None:
    """Week numbers must run 1..N."""
    weeks = list(program.weeks)
    weeks[0], weeks[1] = weeks[1], weeks[0]
    broken = program.model_copy(update={"weeks": weeks})
    with pytest.raises(ProgramInvariantError, match="Week number mismatch"):
        validate_program(broken, 5, Lift.BENCH)


def test_validate_program_priority_exposure(program: GeneratedProgram) -> None:
    """A priority lift that is not dominant is detected."""
    with pytest.raises(ProgramInvariantError, match="priority lift squat"):
        validate_program(program, 5, Lift.SQUAT)


def test_validate_increment() -> None:
    """None and positive increments pass; zero and negatives do not."""
    validate_increment(None)
    validate_increment(1.25)
    with pytest.raises(InvalidProfileError, match="Plate increment must be positive"):
        validate_increment(0)
