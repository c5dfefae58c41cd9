"""Logging helpers for Lore.

Lore logs through the standard library ``logging`` module under the
``lore`` namespace and never installs handlers itself; applications (and the
``lore`` command line) decide where records go.

Example:
    >>> from lore.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsed %d lines", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "lore." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'lore.mymodule'
        >>> get_logger("lore.parser").name
        'lore.parser'
    """
    if not (name == "lore" or name.startswith("lore.")):
        name = f"lore.{name}"
    return logging.getLogger(name)
