"""Logging configuration with rich output on stderr."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "reclaim"


def configure_logging(level: str = "WARNING") -> None:
    """Configure the reclaim logger.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR).
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(log_level)
