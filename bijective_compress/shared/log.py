"""
Logging setup for the command line entry point.
Library modules only create child loggers; handlers are attached here.
"""

import logging
import sys

from bijective_compress.shared.config import LOGGER_NAME, LOG_FORMAT


def get_logger(component: str) -> logging.Logger:
    """Return the package logger for a component (e.g. 'codec' -> bijective_compress.codec)."""
    return logging.getLogger(f"{LOGGER_NAME}.{component}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a stdout handler to the package logger.
    - DEBUG level when verbose, WARNING otherwise
    - Replaces any handler installed by a previous call
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger


class IntTrace:
    """Defers rendering of a big integer until a debug record is actually emitted."""

    def __init__(self, value: int):
        self.value = value

    def __str__(self) -> str:
        try:
            return str(self.value)
        except ValueError:
            # decimal conversion refused by the interpreter's digit limit
            return hex(self.value)
