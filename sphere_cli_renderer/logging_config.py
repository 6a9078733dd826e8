#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""
Logging Configuration
Sets up the package logger. Frames go to stdout, so the console handler
writes to stderr.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "sphere_cli_renderer"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None,
                  console: bool = True) -> logging.Logger:
    """
    Configures the logger for the 'sphere_cli_renderer' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        console: Attach a stderr handler. Curses playback turns this off
            so log lines don't land on top of the frames.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Drop handlers from an earlier call so lines aren't duplicated
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug("Logging initialized.")
    return logger


def verbosity_to_level(verbose: int) -> int:
    """0 -> WARNING, 1 -> INFO, 2+ -> DEBUG."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING
