"""Utility modules for spanlex.

Provides:
- text: escape_markup, unescape_markup, escape_html
- logger: get_logger for logging
"""

from spanlex.utils.logger import get_logger
from spanlex.utils.text import escape_html, escape_markup, unescape_markup

__all__ = [
    "escape_html",
    "escape_markup",
    "get_logger",
    "unescape_markup",
]
