"""Line tokens produced by the Lore lexer.

Lore is line-oriented, so the lexer emits exactly one LineToken per source
line. Each token records the line's indentation, its syntactic kind, and the
payload the parser needs to build a node.

Thread Safety:
LineToken is frozen (immutable) and safe to share across threads.
LineKind is an enum (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, auto

from lore.location import SourceLocation


class LineKind(Enum):
    """Syntactic kinds a line can have."""

    BLANK = auto()  # whitespace only
    ATOM = auto()  # [ text ] or bare_token
    LINK = auto()  # atom = atom
    DOMAIN = auto()  # + atom
    COMMENT = auto()  # # text (only with comments_enabled)


@dataclass(frozen=True, slots=True)
class LineToken:
    """One classified source line.

    Attributes:
        kind: The line kind
        value: Payload. Atom value for ATOM, label for DOMAIN, the whole
            trimmed line for LINK, empty for BLANK
        indent: Leading whitespace width in columns (tabs expanded)
        lineno: Line number (1-indexed)
        col: Column where content starts (1-indexed)
        line: Raw line text without the newline, for error messages
        source_file: Optional source file path

    """

    kind: LineKind
    value: str
    indent: int
    lineno: int
    col: int
    line: str = field(default="", repr=False)
    source_file: str | None = field(default=None, repr=False)

    @property
    def location(self) -> SourceLocation:
        """Source location of the line's content."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            end_col_offset=len(self.line.rstrip()) + 1,
            source_file=self.source_file,
        )

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"LineToken({self.kind.name}, {val!r}, {self.lineno}:{self.col}, indent={self.indent})"
