"""Loguru configuration for the CLI."""

import logging
import sys

from loguru import logger

LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> <level>{level: <8}</level> {message}"


def configure_logger(level: str = "WARNING") -> None:
    """
    Configure loguru with a single stderr sink.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ...)
    """
    # Suppress verbose Azure SDK logging
    logging.getLogger("azure").setLevel(logging.WARNING)
    logging.getLogger("azure.identity").setLevel(logging.ERROR)
    logging.getLogger("azure.core.pipeline.policies").setLevel(logging.ERROR)

    logger.remove()  # remove the default logger
    logger.add(
        sink=sys.stderr,
        level=level,
        format=LOG_FORMAT,
        colorize=None,
        diagnose=False,
    )
