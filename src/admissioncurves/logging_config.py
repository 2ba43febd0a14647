"""Logging setup for the `admissioncurves` logger tree."""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

PACKAGE_LOGGER = "admissioncurves"


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send the application's log records to stdout and, optionally, a file.

    Only the package logger is configured, so third-party libraries (Qt,
    pyqtgraph) keep their own defaults. Calling it again replaces the
    previous handlers.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Path of a log file, truncated on every start.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_make_handler(logging.StreamHandler(sys.stdout), level))
    if log_file:
        logger.addHandler(_make_handler(logging.FileHandler(log_file, mode='w', encoding='utf-8'), level))

    logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
