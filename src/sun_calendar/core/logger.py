"""
Logging configuration for the sun calendar.

The calendar report is printed to stdout, so the console log handler
writes to stderr and defaults to WARNING. Everything down to DEBUG,
including each HTTP request, goes to the log file.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

DEFAULT_LOG_FILE = "logs/sun_calendar.log"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(threadName)s - %(filename)s:%(lineno)d - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _level(name: Optional[str], default: int) -> int:
    if not name:
        return default
    return getattr(logging, name.upper(), default)


def setup_logger(
    name: str = "sun_calendar",
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    console_level: str = "WARNING"
) -> logging.Logger:
    """
    Set up the application logger.

    Args:
        name: Logger name
        log_file: Path to log file. If None, uses LOG_FILE env var or the default path
        log_level: Logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_level: Minimum level echoed to stderr

    Returns:
        Configured logger instance
    """
    if log_file is None:
        log_file = os.getenv("LOG_FILE", DEFAULT_LOG_FILE)

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(_level(log_level, logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_level(console_level, logging.WARNING))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    # Pipelines run in worker threads; threadName tells them apart
    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    logger.propagate = False

    return logger


class LoggerContext:
    """Logs the start, duration and outcome of a search or other operation."""

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.start_time: Optional[datetime] = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            self.logger.error(
                f"Failed {self.operation} after {duration:.2f}s: {exc_val}",
                exc_info=True
            )
            return False

        self.logger.info(f"Completed {self.operation} in {duration:.2f}s")
        return False
