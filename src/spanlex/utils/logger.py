"""Minimal logging utilities for spanlex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from spanlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Classifying snippet")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "spanlex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'spanlex.mymodule'
    """
    if not (name == "spanlex" or name.startswith("spanlex.")):
        name = f"spanlex.{name}"
    return logging.getLogger(name)
