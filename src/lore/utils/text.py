"""Text helpers for HTML output.

Example:
    >>> from lore.utils.text import slugify
    >>> slugify("Search Engines")
    'search-engines'
"""

from __future__ import annotations

import html as html_module
import re

_NON_WORD = re.compile(r"[^\w\s-]")
_SEPARATORS = re.compile(r"[-\s]+")


def slugify(text: str, separator: str = "-", fallback: str = "domain") -> str:
    """Convert a domain label to an id-safe slug with Unicode support.

    Unicode word characters are kept, so labels such as ``搜索`` produce
    usable ids instead of collapsing to nothing.

    Args:
        text: Text to slugify
        separator: Character to use between words
        fallback: Slug to use when nothing is left after cleaning

    Returns:
        Lowercase slug, or ``fallback`` if text has no word characters

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("搜索 引擎")
        '搜索-引擎'
        >>> slugify("***")
        'domain'
    """
    text = text.lower().strip()
    text = _NON_WORD.sub("", text)
    text = _SEPARATORS.sub(separator, text)
    text = text.strip(separator)
    return text or fallback


def escape_html(text: str) -> str:
    """Escape HTML special characters for text and attribute values.

    Converts ``&``, ``<``, ``>``, ``"`` and ``'`` to entities.

    Examples:
        >>> escape_html("<b>'x' & y</b>")
        '&lt;b&gt;&#x27;x&#x27; &amp; y&lt;/b&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)
