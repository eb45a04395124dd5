"""Utility modules for Alinea.

Provides:
- text: collapse_whitespace, verbatim_lines for text node handling
- logger: get_logger for logging
"""

from alinea.utils.logger import get_logger
from alinea.utils.text import collapse_whitespace, verbatim_lines

__all__ = [
    "collapse_whitespace",
    "get_logger",
    "verbatim_lines",
]
