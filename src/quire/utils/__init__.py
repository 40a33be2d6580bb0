"""Utility modules for Quire.

Provides:
- logger: get_logger for namespaced logging
"""

from quire.utils.logger import get_logger

__all__ = [
    "get_logger",
]
