"""Logging configuration for spellbook."""
import os
import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:{line} - <level>{message}</level>"


def configure_logging(level=None):
    """
    Configure Loguru logging to stderr. The level defaults to the
    SPELLBOOK_LOG_LEVEL environment variable, or WARNING if it is unset.
    """
    logger.remove()

    log_level = (level or os.getenv("SPELLBOOK_LOG_LEVEL", "WARNING")).upper()
    logger.add(sys.stderr, level=log_level, format=LOG_FORMAT)

    return logger
