"""Logger configuration for Powerplan.

Generator events pass their fields as loguru extras (stage, status,
duration_ms, ...). The console sink appends them to the message; the
optional file sink writes one JSON record per line so runs can be
inspected after the fact.
"""

import sys
from pathlib import Path
from typing import TextIO

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level> <dim>{extra}</dim>"
)


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    stream: TextIO | None = None,
) -> None:
    """Configure loguru with a console sink and an optional JSON file sink.

    Nothing is configured on import; entry points (the CLI) call this once.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file. If None, only console logging.
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
        stream: Console stream; defaults to stderr so stdout stays parseable
    """
    logger.remove()

    logger.add(
        stream or sys.stderr,
        format=CONSOLE_FORMAT,
        level=level,
        colorize=stream is None,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            serialize=True,
        )

    logger.debug("Logger initialized", log_level=level, log_file=log_file)
