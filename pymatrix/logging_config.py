"""
Logging setup for applications using PyMatrix.

Library modules log under the "pymatrix" namespace at DEBUG only: index and
shape faults just before they are raised, and the shapes of matrix
products. Nothing is printed unless an application opts in here.
"""

import logging
import sys

LOGGER_NAME = "pymatrix"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _resolve_level(level: int | str) -> int:
    """Accept logging.DEBUG as well as 'DEBUG' / 'debug'."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"level: unknown logging level {level!r}")
        return resolved
    return level


def setup_logging(
    level: int | str = logging.INFO,
    log_file: str | None = None,
) -> logging.Logger:
    """
    Attach handlers to the 'pymatrix' logger.

    Replaces any handlers installed by an earlier call (including the
    NullHandler added at import), so calling this twice never duplicates
    records.

    Args:
        level: Threshold as an int or a level name
        log_file: Also write records to this file (overwritten), if given

    Returns:
        The configured 'pymatrix' logger

    Raises:
        ValueError: If level is an unknown level name
    """
    threshold = _resolve_level(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.setLevel(threshold)
    for handler in handlers:
        handler.setLevel(threshold)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
