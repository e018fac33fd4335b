"""
Logging configuration for the browser step contexts
"""

import logging
import sys

LOGGER_NAME = "browser_contexts"


def setup_logging(level=logging.INFO):
    """
    Configure logging for the step contexts

    Args:
        level: Logging level (default: INFO)

    Returns:
        logging.Logger: The configured package logger
    """
    base_logger = logging.getLogger(LOGGER_NAME)
    base_logger.setLevel(level)

    # Remove existing handlers
    base_logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    # Simple format; behave already prints the step being run
    handler.setFormatter(logging.Formatter("%(levelname)8s %(message)s"))
    base_logger.addHandler(handler)

    return base_logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger for a module."""
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
