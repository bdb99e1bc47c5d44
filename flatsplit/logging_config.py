"""
Logging configuration for the flat file splitter
"""

import logging
import sys

LOGGER_NAME = "flatsplit"

_UNITS = ("bytes", "KB", "MB", "GB", "TB")


def display_size(size: int) -> str:
    """
    Render a byte count the way operators read it (e.g. "12 MB")

    Rounds down to the largest whole unit, like commons-io does.
    """
    value = size
    for unit in _UNITS:
        if value < 1024 or unit == _UNITS[-1]:
            return f"{value} {unit}"
        value //= 1024
    return f"{value} {_UNITS[-1]}"


def setup_logging(level=logging.INFO) -> logging.Logger:
    """
    Configure logging for the splitter

    Args:
        level: Logging level (default: INFO)

    Returns:
        The configured package logger
    """
    base_logger = logging.getLogger(LOGGER_NAME)
    base_logger.setLevel(level)

    # Remove existing handlers
    base_logger.handlers = []

    # Console handler on stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)8s %(message)s"))

    base_logger.addHandler(handler)

    return base_logger


logger = logging.getLogger(LOGGER_NAME)
