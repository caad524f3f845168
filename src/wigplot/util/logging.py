"""
wigplot/util/logging
~~~~~~~~~~~~~~~~~~~~

Loggers for the rendering pipeline. The level is read from the
WIGPLOT_LOG_LEVEL environment variable (DEBUG, INFO, WARNING, ERROR,
CRITICAL) and defaults to WARNING.
"""

from __future__ import annotations

import logging
import os

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level() -> int:
    """
    Resolves the logging level from the environment.

    Returns:
        int: Logging level, WARNING when unset or unrecognized.
    """
    name = os.environ.get("WIGPLOT_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """
    Gets or creates a logger with the package-wide format.

    Args:
        name (str): Logger name, typically ``__name__``.

    Returns:
        logging.Logger: Configured logger.
    """
    logger = logging.getLogger(name)
    # Configure once; repeated calls must not stack handlers
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_resolve_level())
    return logger
