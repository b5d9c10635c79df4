"""Logging utility for CSS Document."""

import logging
from typing import Union

from .config import LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT

def setup_logging(log_level: Union[int, str] = LOG_LEVEL) -> None:
    """Set up logging configuration.

    Log records go to stderr so that command output on stdout stays clean.
    """
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[
            logging.StreamHandler()
        ]
    )

def get_logger(name):
    """Get a logger instance for the specified module.

    Args:
        name: Name of the module

    Returns:
        Logger instance
    """
    return logging.getLogger(name)

# Exported functions
__all__ = ['setup_logging', 'get_logger']
