"""
Logging setup for the command-line entry points.

The library logs through loguru's shared logger; applications decide
where it goes and at which level.
"""

import os
import sys

from loguru import logger


DEFAULT_LOG_LEVEL = os.getenv("FOXCATCHER_LOG_LEVEL", "WARNING")

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str | None = None) -> int:
    """
    Send log records to stderr at the given level.

    Replaces any previously added sinks. Returns the loguru sink id.
    """
    logger.remove()
    return logger.add(sys.stderr, level=(level or DEFAULT_LOG_LEVEL).upper(), format=LOG_FORMAT)
