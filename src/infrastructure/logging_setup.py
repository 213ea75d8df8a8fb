"""Logging configuration."""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def parse_log_level(value: str) -> str:
    """Return the upper-cased level name, raising ValueError if loguru does not know it."""
    level = value.strip().upper() or "INFO"
    try:
        logger.level(level)
    except ValueError:
        raise ValueError(f"unknown log level: {value!r}") from None
    return level


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with a stderr sink at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=parse_log_level(level), format=LOG_FORMAT)
