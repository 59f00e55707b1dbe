"""
Run Logger — timestamped progress lines to the console and a per-run log file.

Every entry is formatted as "[YYYY-mm-dd HH:MM:SS] message". A new log file
named test-execution-log-<timestamp>.txt is created for each run. Failing to
open or write the file is reported on stderr and never aborts a scenario.
"""

import logging
import os
import sys
from datetime import datetime

LOGGER_NAME = "careers_suite"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_NAME_FORMAT = "%Y-%m-%d_%H-%M-%S"

# Path of the current run's log file (None until setup, or if it could not be opened)
log_file_path = None


def get_logger(name: str = None) -> logging.Logger:
    """Return the suite logger, or a child of it for a module."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(log_dir: str, level: int = logging.INFO) -> logging.Logger:
    """
    Configure the suite logger to write to both console and a timestamped file.

    Args:
        log_dir: Directory for the log file (created if missing).
        level: Logging level for the suite logger.

    Returns:
        The configured suite logger.
    """
    global log_file_path

    logger = get_logger()
    logger.setLevel(level)

    # Prevent duplicate handlers if called more than once per run
    if logger.handlers:
        return logger

    logger.propagate = False
    formatter = logging.Formatter("[%(asctime)s] %(message)s", datefmt=TIMESTAMP_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    timestamp = datetime.now().strftime(FILE_NAME_FORMAT)
    path = os.path.join(log_dir, f"test-execution-log-{timestamp}.txt")
    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as e:
        print(f"[Logger Error] Failed to open log file {path}: {e}", file=sys.stderr)
        log_file_path = None
    else:
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        log_file_path = path

    return logger


def shutdown_logging() -> None:
    """Flush, close and detach all suite handlers."""
    global log_file_path

    logger = get_logger()
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    log_file_path = None


def log(message: str) -> None:
    """Log a progress message with timestamp to both console and file."""
    get_logger().info(message)


def log_scenario_start(scenario_name: str) -> None:
    log(f"🚀 Starting Scenario: {scenario_name}")


def log_scenario_end(scenario_name: str, status: str) -> None:
    log(f"🏁 Finished Scenario: {scenario_name} | Status: {status}")
