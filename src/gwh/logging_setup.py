"""Logging configuration for the gwh CLI."""

import logging
import sys

LOG_FORMAT = "[gwh] %(message)s"


def configure_logging(debug: bool) -> None:
    """Send gwh log records to stderr, at DEBUG level when debug is on."""
    logger = logging.getLogger("gwh")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
