"""Lore source renderer. Writes a Document back out as canonical Lore.

Values are written bare when they scan back as a single bare token and as
``[ value ]`` otherwise, indentation is a fixed number of spaces per domain
level. For any parsed document, ``parse(LoreRenderer().render(doc)) == doc``.

Example:
    >>> from lore import parse
    >>> doc = parse("+   [ my links ]\\n    a   =   https://a.com")
    >>> print(LoreRenderer().render(doc), end="")
    + [ my links ]
      a = https://a.com
"""

from lore.errors import RenderError
from lore.lexer.scanner import PieceKind, is_bare_token, scan_pieces
from lore.nodes import Atom, Document, Domain, Link, Node
from lore.stringbuilder import StringBuilder


class LoreRenderer:
    """Render a Document to canonical Lore source."""

    __slots__ = ("_indent_width",)

    def __init__(self, indent_width: int = 2) -> None:
        if indent_width < 1:
            msg = f"indent_width must be positive, got {indent_width}"
            raise ValueError(msg)
        self._indent_width = indent_width

    def render(self, node: Document) -> str:
        """Render document to Lore source text."""
        if not isinstance(node, Document):
            msg = f"LoreRenderer.render() expects a Document, got {type(node).__name__}"
            raise RenderError(msg)
        sb = StringBuilder(indent=" " * self._indent_width)
        for child in node.children:
            self._render_node(child, sb, 0)
        return sb.build()

    def _render_node(self, node: Node, sb: StringBuilder, level: int) -> None:
        match node:
            case Atom(value=value):
                sb.line(level, format_atom(value))
            case Link(key=key, target=target):
                sb.line(level, f"{format_atom(key)} = {format_target(target)}")
            case Domain(label=label, children=children):
                sb.line(level, f"+ {format_atom(label)}")
                for child in children:
                    self._render_node(child, sb, level + 1)
            case _:
                msg = f"Cannot render node of type {type(node).__name__}"
                raise RenderError(msg)


def format_atom(value: str) -> str:
    """Write value as a bare token when possible, bracketed otherwise.

    Raises:
        RenderError: value needs brackets but contains ``]``
    """
    if is_bare_token(value) and not value.startswith("#"):
        return value
    return _bracket(value)


def format_target(target: str) -> str:
    """Write a link target. Bare targets may contain ``=`` (query strings).

    A ``[`` after an inner ``=`` starts a new piece on re-scan, so a target
    whose pieces include an unclosed bracket is bracketed as a whole.
    """
    if not target or target.startswith("[") or any(c.isspace() for c in target):
        return _bracket(target)
    if any(p.kind is PieceKind.UNCLOSED for p in scan_pieces(target)):
        return _bracket(target)
    return target


def _bracket(value: str) -> str:
    if "]" in value or "\n" in value:
        msg = f"value {value!r} cannot be written as a Lore atom"
        raise RenderError(msg)
    if not value:
        return "[ ]"
    return f"[ {value} ]"
