"""Log file and console setup for the service process."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from student_records.config import Settings

# Every module logs under this name via logging.getLogger(__name__)
PACKAGE_LOGGER = "student_records"

LOG_FILE = "student_records.log"
ROTATE_AT_BYTES = 5 * 1024 * 1024
ROTATED_FILES_KEPT = 3

LINE_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"


def setup_logging(
    settings: Settings,
    console: bool = True,
    rotate_at_bytes: int = ROTATE_AT_BYTES,
    rotated_files_kept: int = ROTATED_FILES_KEPT,
) -> logging.Logger:
    """Send package logs to a rotating file under ``settings.log_dir``.

    Level and directory come only from the already validated settings.
    Calling it again replaces the handlers from the previous call.

    Args:
        settings: Loaded service settings.
        console: Also write to stderr.
        rotate_at_bytes: File size that triggers a rollover.
        rotated_files_kept: Number of rolled-over files to keep.

    Returns:
        The package logger.
    """
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    level = logging.getLevelName(settings.log_level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)

    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_dir / LOG_FILE,
            maxBytes=rotate_at_bytes,
            backupCount=rotated_files_kept,
            encoding="utf-8",
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(LINE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s at %s", log_dir / LOG_FILE, settings.log_level)
    return logger
