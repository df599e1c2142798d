"""Utility modules for strscan.

Provides:
- logger: get_logger for logging
"""

from strscan.utils.logger import get_logger

__all__ = [
    "get_logger",
]
