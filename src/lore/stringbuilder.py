"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end. Renderers emit one indented line
per node, so the builder also knows how to prefix a line with N levels of
indentation.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient, indentation-aware string accumulator.

    Usage:
            >>> sb = StringBuilder(indent="  ")
            >>> _ = sb.line(0, "<div>").line(1, "<p>x</p>").line(0, "</div>")
            >>> sb.build()
            '<div>\\n  <p>x</p>\\n</div>\\n'

    """

    __slots__ = ("_parts", "_indent")

    def __init__(self, indent: str = "  ") -> None:
        """Initialize empty StringBuilder.

        Args:
            indent: String repeated once per level by line()
        """
        self._parts: list[str] = []
        self._indent = indent

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def line(self, level: int, s: str) -> StringBuilder:
        """Append s on its own line, indented by level steps."""
        if level > 0:
            self._parts.append(self._indent * level)
        self._parts.append(s)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
