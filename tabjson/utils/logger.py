"""
Package logger

The rich handler itself is installed by the package root; this module only
exposes the "tabjson" logger and a helper to change its level.
"""

import logging

logger = logging.getLogger("tabjson")


def set_level(level: int | str) -> None:
    """
    Set the level of all tabjson loggers

    Args:
        level: logging level number or name ("DEBUG", "INFO", ...)
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
