"""Minimal logging utilities for scmlex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from scmlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenized %d lexemes", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "scmlex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'scmlex.mymodule'
    """
    if not (name == "scmlex" or name.startswith("scmlex.")):
        name = f"scmlex.{name}"
    return logging.getLogger(name)
