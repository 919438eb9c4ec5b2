"""Logging configuration for tallybook.

Log records go to stderr so they never mix with report output on stdout.
"""

import logging
import os

LOGGER_NAME = "tallybook"
LOG_LEVEL_ENV_VAR = "TALLYBOOK_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def resolve_log_level(level: str | None = None) -> str:
    """Return the log level name from the argument, environment or default."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    level = level.upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log level '{level}'")
    return level


def setup_logging(level: str | None = None) -> logging.Logger:
    """Set up application logging with a console handler.

    Args:
        level: Log level name. Defaults to TALLYBOOK_LOG_LEVEL, then WARNING.

    Returns:
        Configured logger instance.
    """
    resolved = resolve_log_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(resolved)
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The tallybook logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
