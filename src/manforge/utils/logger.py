"""Minimal logging utilities for manforge.

Provides a get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure output.

Example:
    >>> from manforge.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenized %d lines", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "manforge." prefix.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'manforge.mymodule'
    """
    if not (name == "manforge" or name.startswith("manforge.")):
        name = f"manforge.{name}"
    return logging.getLogger(name)
