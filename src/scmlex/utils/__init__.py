"""Utility modules for scmlex.

Provides:
- logger: get_logger for logging
"""

from scmlex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
