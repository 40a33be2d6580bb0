"""Namespaced loggers for Quire modules.

All Quire loggers live under the ``quire`` logger, which carries a
NullHandler so an application that never configures logging sees nothing.
Everything Quire logs is at DEBUG: implicit closes of unterminated blocks
and each diagnostic as it is recorded.

Example:
    >>> import logging
    >>> logging.getLogger("quire").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

_ROOT = "quire"

logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``quire`` namespace.

    Module names that are already under ``quire`` are used as-is.

    Example:
        >>> get_logger("mymodule").name
        'quire.mymodule'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
