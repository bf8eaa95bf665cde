"""Utility modules for enlace.

Provides:
- text: escape_href for link attributes
- logger: get_logger for logging
"""

from enlace.utils.logger import get_logger
from enlace.utils.text import escape_href

__all__ = [
    "escape_href",
    "get_logger",
]
