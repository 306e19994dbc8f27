"""Logging setup for applications that want geomprim's debug output."""
import logging
import sys


def setup_logging(level: int = logging.INFO, stream=None) -> logging.Logger:
    """Send the 'geomprim' logger to *stream* (stdout by default) at *level*.

    Calling again replaces the handler rather than adding a second one.
    """
    logger = logging.getLogger("geomprim")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)
    return logger
