"""Minimal logging utilities for Alinea.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; configuring output is up to the host
(the CLI does it with logging.basicConfig).

Example:
    >>> from alinea.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Building layout")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "alinea." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'alinea.mymodule'
    """
    if not (name == "alinea" or name.startswith("alinea.")):
        name = f"alinea.{name}"
    return logging.getLogger(name)
