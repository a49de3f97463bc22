"""Logging configuration for ensure debug output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from screenplay_ensure.config import EnsureSettings


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "screenplay_ensure",
) -> logging.Logger:
    """
    Configure and return a logger for ensure debug output.

    Writes to debug_file when one is given, and to stderr if verbose=True.
    Calling it again for the same logger name replaces the previous handlers.

    Args:
        debug_file: Optional path to a debug log file (created if missing)
        verbose: If True, also log to stderr.
        logger_name: Name of the logger instance

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Clear any existing handlers for this specific logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger


def configure_logging(settings: EnsureSettings) -> logging.Logger:
    """Apply the logging part of ``settings`` and return the ensure logger."""
    debug_file = Path(settings.log_file) if settings.log_file else None
    return setup_logger(debug_file, verbose=settings.verbose, logger_name=settings.logger_name)
