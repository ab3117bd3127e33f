"""
Logging Configuration
Sets up the root logger used by the loader and the command-line entry point.
"""
import logging
import sys
from typing import Optional, TextIO

from settings import LOG_LEVEL, LOG_FORMAT


def setup_logging(level: int = LOG_LEVEL, stream: Optional[TextIO] = None) -> None:
    """
    Configures the root logger to write to the diagnostic stream.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        stream: Stream for the handler, sys.stderr when omitted.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate lines when main() runs more than once in a process
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
