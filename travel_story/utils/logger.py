"""
Logging utilities shared by every module of the Travel Story API.

Key Features:
    - Console output plus a size-rotating log file per process run
    - Rollover failures reported on stderr instead of crashing the request
    - Log level driven by LOG_LEVEL, file output toggled by LOG_TO_FILE
    - Date-based log directories, pruned after a week
"""

import datetime
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_FILE_BASENAME = "travel_story"

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
)
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() not in ("0", "false", "no")

MAX_LOG_SIZE_MB = 5
MAX_LOG_SIZE_BYTES = MAX_LOG_SIZE_MB * 1024 * 1024
MAX_BACKUP_COUNT = 10
KEEP_LOG_DAYS = 7

# All loggers of one process write to the same file
_GLOBAL_LOG_FILE: Path | None = None


def _get_log_file() -> Path:
    global _GLOBAL_LOG_FILE
    if _GLOBAL_LOG_FILE is None:
        now = datetime.datetime.now()
        date_dir = LOG_DIR / now.strftime("%Y-%m-%d")
        date_dir.mkdir(parents=True, exist_ok=True)
        run_timestamp = now.strftime("%Y-%m-%d_%H-%M-%S")
        _GLOBAL_LOG_FILE = date_dir / f"{LOG_FILE_BASENAME}_{run_timestamp}.log"
        cleanup_old_logs(keep_days=KEEP_LOG_DAYS)
    return _GLOBAL_LOG_FILE


class SafeRotatingFileHandler(RotatingFileHandler):
    """Size-based rotation that keeps logging when the rollover fails."""

    def doRollover(self):
        try:
            super().doRollover()
        except OSError as e:
            sys.stderr.write(
                f"Log rotation failed: {e}. Continuing with current log file.\n"
            )
            sys.stderr.flush()


def _get_log_level(level_str: str) -> int:
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(level_str.upper(), logging.INFO)


def setup_logger(name: str, level: str | None = None) -> logging.Logger:
    """Set up a logger with a console handler and, optionally, a file handler."""
    logger = logging.getLogger(name)
    log_level = _get_log_level(level or DEFAULT_LOG_LEVEL)
    logger.setLevel(log_level)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    logger.addHandler(console_handler)

    if LOG_TO_FILE:
        file_handler = SafeRotatingFileHandler(
            _get_log_file(),
            maxBytes=MAX_LOG_SIZE_BYTES,
            backupCount=MAX_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def cleanup_old_logs(keep_days: int = KEEP_LOG_DAYS) -> int:
    """Delete date directories older than ``keep_days``. Returns files removed."""
    if not LOG_DIR.exists():
        return 0

    cutoff = datetime.datetime.now() - datetime.timedelta(days=keep_days)
    deleted_count = 0

    for date_dir in LOG_DIR.iterdir():
        if not date_dir.is_dir():
            continue
        try:
            dir_date = datetime.datetime.strptime(date_dir.name, "%Y-%m-%d")
        except ValueError:
            # Not one of ours
            continue
        if dir_date >= cutoff:
            continue

        for log_file in date_dir.iterdir():
            try:
                log_file.unlink()
                deleted_count += 1
            except OSError as e:
                sys.stderr.write(f"Could not delete log file {log_file}: {e}\n")
        try:
            date_dir.rmdir()
        except OSError:
            pass  # still holds files we failed to delete

    return deleted_count
