"""Logging configuration for the DDL formatter"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "ddl_formatter"


def setup_logger(level: str = "WARNING") -> logging.Logger:
    """
    Setup console logging (rich, on stderr so formatted SQL on stdout stays clean).

    Args:
        level: Level name for the console handler (e.g., "DEBUG", "INFO")

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = RichHandler(
        rich_tracebacks=True,
        markup=True,
        show_time=True,
        show_path=False,
        console=Console(stderr=True),
    )
    console_handler.setLevel(getattr(logging, level.upper(), logging.WARNING))
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the configured logger instance."""
    return logging.getLogger(LOGGER_NAME)
