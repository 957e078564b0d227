"""Logging configuration for rcflow."""

from __future__ import annotations

import logging
from pathlib import Path

CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Suppress per-request HTTP client logs
QUIET_LOGGERS = ("httpx", "httpcore")


def _file_handler(log_file: str) -> logging.FileHandler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="w")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
    return handler


def setup_logging(
    logger_name: str = "rcflow",
    log_file: str | None = None,
    verbose: bool = False,
) -> logging.Logger:
    """
    Attach a console handler, and a file handler if requested, to the
    package logger. Calling it again replaces the previous handlers.

    Args:
        logger_name: Package logger to configure
        log_file: Path to a log file, always written at DEBUG
        verbose: DEBUG on the console instead of INFO

    Returns:
        The configured logger
    """
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)
    for old in logger.handlers:
        old.close()
    logger.handlers.clear()
    logger.addHandler(console_handler)
    if log_file:
        logger.addHandler(_file_handler(log_file))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger
