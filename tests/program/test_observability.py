"""Tests for generator observability.

These tests verify that:
- Every stage emits start + success events
- Failures emit fail events and re-raise
- Status values are validated
- Stage metadata reaches the success record
"""

from unittest.mock import patch

import pytest

from powerplan.program.generator import generate_program
from powerplan.program.observability import GeneratorStage, StageStatus, log_stage_event, stage_timer
from powerplan.program.types import LifterProfile


def test_generator_stage_enum_values():
    """Test that GeneratorStage enum has correct values."""
    assert GeneratorStage.PROFILE.value == "profile_validate"
    assert GeneratorStage.SCHEME.value == "scheme_select"
    assert GeneratorStage.SPLIT.value == "day_split"
    assert GeneratorStage.WEEKS.value == "week_expand"
    assert GeneratorStage.RECOMMENDATION.value == "recommendation"


def test_log_stage_event_rejects_unknown_status():
    """Test that log_stage_event only accepts StageStatus values."""
    with pytest.raises(ValueError, match="not a valid StageStatus"):
        log_stage_event(GeneratorStage.PROFILE, "done")


def test_stage_timer_success():
    """Test that stage_timer emits start then success with a duration."""
    with patch("powerplan.program.observability.logger") as mock_logger:
        with stage_timer(GeneratorStage.SCHEME):
            pass

    calls = mock_logger.debug.call_args_list
    assert [c[1]["status"] for c in calls] == ["start", "success"]
    assert all(c[1]["stage"] == "scheme_select" for c in calls)
    assert "duration_ms" in calls[1][1]


def test_stage_timer_failure_reraises():
    """Test that stage_timer emits a fail event and re-raises."""
    with patch("powerplan.program.observability.logger") as mock_logger:
        with pytest.raises(RuntimeError, match="boom"):
            with stage_timer(GeneratorStage.WEEKS):
                raise RuntimeError("boom")

    fail_call = mock_logger.debug.call_args_list[-1]
    assert fail_call[1]["status"] == "fail"
    assert fail_call[1]["error"] == "boom"
    assert fail_call[1]["error_type"] == "RuntimeError"


def test_generate_program_emits_every_stage(intermediate_profile: LifterProfile):
    """Test that a full generation walks every stage in order."""
    with patch("powerplan.program.observability.logger") as mock_logger:
        generate_program(intermediate_profile)

    successes = [
        c[1]["stage"] for c in mock_logger.debug.call_args_list if c[1].get("status") == "success"
    ]
    assert successes == [stage.value for stage in GeneratorStage]
    mock_logger.info.assert_called_once()
    assert mock_logger.info.call_args[0][0] == "program_generated"


def test_stage_timer_includes_stage_metadata():
    """Test that keys set inside the stage land on the success record."""
    with patch("powerplan.program.observability.logger") as mock_logger:
        with stage_timer(GeneratorStage.SPLIT) as meta:
            meta["days"] = 5

    success_call = mock_logger.debug.call_args_list[-1]
    assert success_call[1]["status"] == StageStatus.SUCCESS.value
    assert success_call[1]["days"] == 5


def test_generate_program_records_scheme_metadata(intermediate_profile: LifterProfile):
    """Test that the scheme stage reports the selected scheme and duration."""
    with patch("powerplan.program.observability.logger") as mock_logger:
        generate_program(intermediate_profile)

    scheme_success = next(
        c[1]
        for c in mock_logger.debug.call_args_list
        if c[1]["stage"] == "scheme_select" and c[1]["status"] == "success"
    )
    assert scheme_success["scheme"] == "531"
    assert scheme_success["duration"] == 4
