"""
Logging setup for location export.

Progress goes to the console, full detail to a log file.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from datetime import datetime

from . import constants
from ..exceptions import IOFailureError

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _open_log_file(log_file: str) -> logging.FileHandler:
    """Create the log directory and open the log file for appending."""
    try:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as e:
        raise IOFailureError(f"Cannot open log file {log_file}: {e}") from e


def setup_logger(
    name: str = "location_export",
    log_file: Optional[str] = None,
    log_level: str = constants.DEFAULT_LOG_LEVEL
) -> logging.Logger:
    """
    Set up the application logger.

    The console handler shows INFO and above, the file handler everything
    down to DEBUG including tracebacks of failed operations.

    Args:
        name: Logger name
        log_file: Path to log file. If None, uses LOG_FILE env var or default
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance

    Raises:
        IOFailureError: If the log file cannot be opened
    """
    if log_file is None:
        log_file = os.getenv("LOG_FILE", constants.DEFAULT_LOG_FILE)

    # Opened before touching the logger so a failure leaves it unchanged
    file_handler = _open_log_file(log_file)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
        datefmt=DATE_FORMAT
    ))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Repeated setup replaces the previous handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)
    logger.propagate = False

    return logger


class LoggerContext:
    """Context manager for logging specific operations."""

    def __init__(self, logger: logging.Logger, operation: str):
        """
        Initialize logger context.

        Args:
            logger: Logger instance
            operation: Name of the operation being logged
        """
        self.logger = logger
        self.operation = operation
        self.start_time: Optional[datetime] = None

    def __enter__(self):
        """Enter context and log start."""
        self.start_time = datetime.now()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context and log completion or error. Never suppresses exceptions."""
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            self.logger.error(f"Failed {self.operation} after {duration:.2f}s: {exc_val}")
            self.logger.debug(f"Traceback for {self.operation}", exc_info=(exc_type, exc_val, exc_tb))
            return False

        self.logger.info(f"Completed {self.operation} in {duration:.2f}s")
        return False
