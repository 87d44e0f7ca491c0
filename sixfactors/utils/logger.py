"""
Centralized logging utility.

Every module logs through `get_logger(__name__)`; records go to
stderr in one pipe-separated line, with context passed via `extra=`.
"""

import logging
import sys
from typing import Optional

from sixfactors.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Create or retrieve a configured logger instance.

    The level comes from `Settings.LOG_LEVEL`, so it can be set in
    the environment or in `.env`.

    Args:
        name (Optional[str]): Logger name (usually __name__).

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(get_settings().LOG_LEVEL.upper())

    # Uvicorn reloads call this again for the same module
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
