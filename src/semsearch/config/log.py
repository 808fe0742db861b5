"""Loguru sink configuration."""

import sys

from loguru import logger


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with one at the configured level.

    Args:
        level: Minimum level name, e.g. "DEBUG" or "INFO"
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}",
    )
    logger.debug(f"Logging configured at level {level.upper()}")
