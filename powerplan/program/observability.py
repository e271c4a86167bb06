"""Structured logging for the generator pipeline.

Each stage of generate_program runs inside stage_timer, which emits a
start record, then a success or fail record carrying the elapsed time
and whatever the stage wrote into its metadata dict. Records go to the
debug level; only the final program_generated event is logged at info.

Logging is a side channel: nothing here feeds back into the program.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from enum import StrEnum

from loguru import logger

LogValue = str | int | float | bool | None


class GeneratorStage(StrEnum):
    """Pipeline stages of generate_program, in execution order."""

    PROFILE = "profile_validate"
    SCHEME = "scheme_select"
    SPLIT = "day_split"
    WEEKS = "week_expand"
    RECOMMENDATION = "recommendation"


class StageStatus(StrEnum):
    START = "start"
    SUCCESS = "success"
    FAIL = "fail"


def log_event(event: str, **fields: LogValue) -> None:
    """Log a named generator event with structured fields at info level."""
    logger.info(event, **fields)


def log_stage_event(
    stage: GeneratorStage,
    status: StageStatus | str,
    meta: dict[str, LogValue] | None = None,
) -> None:
    """Emit one generator_stage record.

    Args:
        stage: Generator stage
        status: start, success or fail
        meta: Extra fields merged into the record

    Raises:
        ValueError: If status is not a StageStatus value
    """
    status = StageStatus(status)
    logger.debug("generator_stage", stage=stage.value, status=status.value, **(meta or {}))


@contextmanager
def stage_timer(stage: GeneratorStage) -> Iterator[dict[str, LogValue]]:
    """Time a stage and log its outcome.

    Yields a metadata dict; keys the stage sets are included in the
    success record. Exceptions are logged with their type and re-raised.
    """
    meta: dict[str, LogValue] = {}
    log_stage_event(stage, StageStatus.START)
    start_time = time.monotonic()
    try:
        yield meta
    except Exception as e:
        log_stage_event(
            stage,
            StageStatus.FAIL,
            meta={
                "error": str(e),
                "error_type": type(e).__name__,
                "duration_ms": round((time.monotonic() - start_time) * 1000, 3),
            },
        )
        raise
    meta["duration_ms"] = round((time.monotonic() - start_time) * 1000, 3)
    log_stage_event(stage, StageStatus.SUCCESS, meta=meta)
