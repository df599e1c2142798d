"""Minimal logging utilities for strscan.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from strscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiling pattern")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "strscan." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'strscan.mymodule'
    """
    if not (name == "strscan" or name.startswith("strscan.")):
        name = f"strscan.{name}"
    return logging.getLogger(name)
