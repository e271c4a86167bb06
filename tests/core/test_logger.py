"""Tests for logger setup."""

import io
import json

from loguru import logger

from powerplan.core.logger import setup_logger
from powerplan.program.observability import log_event


def test_console_sink_includes_structured_fields() -> None:
    """Event fields are visible on the console line."""
    stream = io.StringIO()
    setup_logger(level="INFO", stream=stream)

    log_event("program_generated", scheme="531", duration=4)

    output = stream.getvalue()
    assert "program_generated" in output
    assert "'scheme': '531'" in output
    assert "'duration': 4" in output


def test_console_sink_respects_level() -> None:
    """Records below the configured level are dropped."""
    stream = io.StringIO()
    setup_logger(level="WARNING", stream=stream)

    log_event("program_generated", scheme="531")
    logger.debug("generator_stage", stage="day_split", status="start")

    assert stream.getvalue() == ""


def test_file_sink_writes_json_records(tmp_path) -> None:
    """The file sink writes one serialized record per line."""
    log_path = tmp_path / "logs" / "powerplan.log"
    setup_logger(level="INFO", log_file=str(log_path), stream=io.StringIO())

    log_event("program_generated", scheme="block", days_per_week=5)
    logger.remove()

    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    event = next(r for r in records if r["record"]["message"] == "program_generated")
    assert event["record"]["extra"] == {"scheme": "block", "days_per_week": 5}
