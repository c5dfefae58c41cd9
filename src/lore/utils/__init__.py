"""Utility modules for Lore.

Provides:
- text: escape_html, slugify for HTML output
- hashing: hash_str for parse cache keys
- logger: get_logger for namespaced logging
"""

from lore.utils.hashing import hash_str
from lore.utils.logger import get_logger
from lore.utils.text import escape_html, slugify

__all__ = [
    "escape_html",
    "get_logger",
    "hash_str",
    "slugify",
]
