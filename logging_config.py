"""
Structured logging configuration for the salon-forecast project.

This module provides a centralized way to configure logging across the application
with different log levels and output files for different concerns.
"""

import logging
import logging.handlers
from pathlib import Path

# Define logger names for different concerns
FORECAST_LOGGER = "salon_forecast"
DEBUG_LOGGER = "salon_forecast.debug"

# Standard log format with module name and line number
LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LOG_DIR = Path("output_dev/forecast_logs")

LOG_FILE_NAMES = (
    "forecast_events.log",
    "warnings_errors.log",
    "debug_detail.log",
    "combined.log",
)

# Track if logging is already configured
_LOGGING_CONFIGURED = False


def clear_logs(log_dir: Path) -> None:
    """
    Clear all log files in the specified directory.

    Args:
        log_dir: Directory containing log files to clear
    """
    for name in LOG_FILE_NAMES:
        log_file = log_dir / name
        if log_file.exists():
            try:
                log_file.unlink()
            except OSError as e:
                print(f"Warning: Could not delete {log_file}: {e}")


def _rotating_handler(path: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
        mode="a",
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(log_dir: Path, debug: bool = False, clear_existing: bool = True) -> None:
    """
    Configure structured logging for the application.

    Creates separate log files for different concerns:
    - forecast_events.log: Events from the salon_forecast package (INFO+)
    - warnings_errors.log: Warnings and errors (WARNING+)
    - debug_detail.log: Detailed debug information (DEBUG, only if debug=True)
    - combined.log: Combined log of all messages (INFO+)

    Args:
        log_dir: Directory where log files will be stored
        debug: If True, enables debug logging and creates debug_detail.log
        clear_existing: If True, clears existing log files before starting
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        return

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    if clear_existing:
        clear_logs(log_dir)

    # Remove all handlers from the root logger before setup
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    file_formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    console_formatter = logging.Formatter("%(levelname)-8s %(message)s")

    # Console handler (for warnings and above)
    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
    console.setFormatter(console_formatter)
    root_logger.addHandler(console)

    root_logger.addHandler(
        _rotating_handler(log_dir / "combined.log", logging.INFO, file_formatter)
    )
    root_logger.addHandler(
        _rotating_handler(log_dir / "warnings_errors.log", logging.WARNING, file_formatter)
    )

    forecast_logger = logging.getLogger(FORECAST_LOGGER)
    for h in forecast_logger.handlers[:]:
        forecast_logger.removeHandler(h)
    forecast_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    forecast_logger.addHandler(
        _rotating_handler(log_dir / "forecast_events.log", logging.INFO, file_formatter)
    )
    forecast_logger.propagate = True  # Allow to bubble up to root

    if debug:
        debug_logger = logging.getLogger(DEBUG_LOGGER)
        for h in debug_logger.handlers[:]:
            debug_logger.removeHandler(h)
        debug_logger.setLevel(logging.DEBUG)
        debug_logger.addHandler(
            _rotating_handler(log_dir / "debug_detail.log", logging.DEBUG, file_formatter)
        )
        debug_logger.propagate = True

    _LOGGING_CONFIGURED = True


def reset_logging() -> None:
    """Drop handlers installed by setup_logging so it can be called again."""
    global _LOGGING_CONFIGURED

    for name in (None, FORECAST_LOGGER, DEBUG_LOGGER):
        target = logging.getLogger(name)
        for handler in target.handlers[:]:
            target.removeHandler(handler)
            handler.close()
        if name is not None:
            target.setLevel(logging.NOTSET)
    _LOGGING_CONFIGURED = False
