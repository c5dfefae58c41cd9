"""Bracket-aware scanning of a single line's content.

A line is split into top-level pieces:

- ``[ ... ]`` bracketed atoms (the first ``]`` closes, no nesting)
- bare tokens, maximal runs of non-whitespace, non-``=`` characters
- ``=`` separators

An ``=`` inside brackets is text, not a separator. A ``[`` with no closing
``]`` on the same line produces a single UNCLOSED piece and ends the scan.

The functions here are pure and allocation-light; both the lexer (to
classify lines) and the parser (to split links) use them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class PieceKind(Enum):
    """Kinds of top-level piece within a line."""

    BRACKET = auto()
    BARE = auto()
    EQUALS = auto()
    UNCLOSED = auto()


@dataclass(frozen=True, slots=True)
class Piece:
    """A top-level piece of line content.

    Attributes:
        kind: Piece kind
        text: Raw text of the piece, brackets included
        start: Offset of the first character within the scanned text
        end: Offset just past the last character
    """

    kind: PieceKind
    text: str
    start: int
    end: int


def scan_pieces(text: str) -> list[Piece]:
    """Split text into top-level pieces.

    Complexity: O(n), single forward pass.

    Examples:
        >>> [p.kind.name for p in scan_pieces("[ a = b ] = c")]
        ['BRACKET', 'EQUALS', 'BARE']
    """
    pieces: list[Piece] = []
    pos = 0
    n = len(text)
    while pos < n:
        char = text[pos]
        if char.isspace():
            pos += 1
        elif char == "[":
            close = text.find("]", pos + 1)
            if close == -1:
                pieces.append(Piece(PieceKind.UNCLOSED, text[pos:], pos, n))
                break
            pieces.append(Piece(PieceKind.BRACKET, text[pos : close + 1], pos, close + 1))
            pos = close + 1
        elif char == "=":
            pieces.append(Piece(PieceKind.EQUALS, "=", pos, pos + 1))
            pos += 1
        else:
            start = pos
            while pos < n and not text[pos].isspace() and text[pos] != "=":
                pos += 1
            pieces.append(Piece(PieceKind.BARE, text[start:pos], start, pos))
    return pieces


def find_unclosed(text: str) -> int:
    """Offset of an unterminated ``[`` in text, or -1."""
    for piece in scan_pieces(text):
        if piece.kind is PieceKind.UNCLOSED:
            return piece.start
    return -1


def find_separator(text: str) -> int:
    """Offset of the first top-level ``=`` in text, or -1."""
    for piece in scan_pieces(text):
        if piece.kind is PieceKind.EQUALS:
            return piece.start
    return -1


def atom_value(piece: Piece) -> str:
    """Value carried by a BRACKET or BARE piece.

    Bracket delimiters are removed together with the padding just inside
    them; everything else is kept verbatim.
    """
    if piece.kind is PieceKind.BRACKET:
        return piece.text[1:-1].strip()
    return piece.text


def read_atom(text: str) -> str | None:
    """Return the atom value if text is exactly one atom, else None.

    Examples:
        >>> read_atom("[ hello,  world ]")
        'hello,  world'
        >>> read_atom("https://example.com")
        'https://example.com'
        >>> read_atom("two tokens") is None
        True
    """
    pieces = scan_pieces(text)
    if len(pieces) != 1:
        return None
    piece = pieces[0]
    if piece.kind not in (PieceKind.BRACKET, PieceKind.BARE):
        return None
    return atom_value(piece)


def is_bare_token(text: str) -> bool:
    """True when text would scan back as a single bare token."""
    if not text or text[0] == "[":
        return False
    return not any(c.isspace() or c == "=" for c in text)
