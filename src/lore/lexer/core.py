"""Line lexer for Lore.

Lore is line-oriented: every source line becomes exactly one LineToken.
For each line the lexer measures indentation, trims the content, then asks
the classifier mixins in fixed precedence order:

    blank → comment (opt-in) → domain → link → atom

An unterminated ``[`` anywhere on the line is reported before any
classification, since it would otherwise hide inside a misleading error.

No regex in the hot path. The token stream is a generator: lazy, single-pass
and not restartable.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from lore.config import get_parse_config
from lore.errors import LexicalError, ParseError, UnterminatedBracket
from lore.lexer.classifiers import (
    AtomClassifierMixin,
    CommentClassifierMixin,
    DomainClassifierMixin,
    LinkClassifierMixin,
)
from lore.lexer.scanner import find_unclosed
from lore.tokens import LineKind, LineToken


class Lexer(
    CommentClassifierMixin,
    DomainClassifierMixin,
    LinkClassifierMixin,
    AtomClassifierMixin,
):
    """Line lexer for Lore source.

    Usage:
        >>> lexer = Lexer("+ group\\n  a = https://a.com")
        >>> for token in lexer.tokenize():
        ...     print(token)
        LineToken(DOMAIN, 'group', 1:1, indent=0)
        LineToken(LINK, 'a = https://a.com', 2:3, indent=2)

    Configuration (tab width, comments) is read from the active ParseConfig
    when the lexer is created.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_lineno",
        "_line",
        "_tab_width",
        "_comments_enabled",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Lore source text (already decoded)
            source_file: Optional source file path for error messages
        """
        if source.startswith("\ufeff"):
            source = source[1:]
        self._source = source
        self._source_file = source_file
        self._lineno = 0
        self._line = ""

        config = get_parse_config()
        self._tab_width = config.tab_width
        self._comments_enabled = config.comments_enabled

    def tokenize(self) -> Iterator[LineToken]:
        """Tokenize source into a stream of line tokens.

        Yields:
            One LineToken per source line, blank lines included

        Raises:
            LexicalError: A line matches none of the Lore forms
            UnterminatedBracket: A ``[`` is never closed on its line

        Complexity: O(n) where n = len(source)
        """
        if not self._source:
            return

        lines = self._source.split("\n")
        # A trailing newline terminates the last line, it does not start a new one
        if lines[-1] == "":
            lines.pop()

        for lineno, raw in enumerate(lines, start=1):
            self._lineno = lineno
            self._line = raw[:-1] if raw.endswith("\r") else raw
            yield self._classify_line(self._line)

    def _classify_line(self, line: str) -> LineToken:
        """Classify one line (without its newline)."""
        indent, content_start = self._calc_indent(line)
        content = line[content_start:].rstrip()
        col = content_start + 1

        if not content:
            return self._make_token(LineKind.BLANK, "", indent, col)

        token = self._try_classify_comment(content, indent, col)
        if token is not None:
            return token

        unclosed = find_unclosed(content)
        if unclosed != -1:
            raise self._error(
                UnterminatedBracket,
                "unterminated bracket: '[' is never closed on this line",
                col + unclosed,
            )

        token = (
            self._try_classify_domain(content, indent, col)
            or self._try_classify_link(content, indent, col)
            or self._try_classify_atom(content, indent, col)
        )
        if token is None:
            raise self._error(
                LexicalError,
                "line is not an atom, a link or a domain header "
                "(wrap free text containing spaces in [ ... ])",
                col,
            )
        return token

    # =========================================================================
    # Helpers
    # =========================================================================

    def _calc_indent(self, line: str) -> tuple[int, int]:
        """Calculate indent width and content start position.

        Spaces count as 1, tabs expand to the next multiple of tab_width.

        Args:
            line: Line content

        Returns:
            (indent_columns, content_start_index)
        """
        indent = 0
        pos = 0
        line_len = len(line)
        tab_width = self._tab_width
        while pos < line_len:
            char = line[pos]
            if char == " ":
                indent += 1
            elif char == "\t":
                indent += tab_width - (indent % tab_width)
            elif char.isspace():
                indent += 1
            else:
                break
            pos += 1
        return indent, pos

    def _make_token(self, kind: LineKind, value: str, indent: int, col: int) -> LineToken:
        """Create a token for the line currently being classified."""
        return LineToken(
            kind=kind,
            value=value,
            indent=indent,
            lineno=self._lineno,
            col=col,
            line=self._line,
            source_file=self._source_file,
        )

    def _error(self, error_cls: type[ParseError], message: str, col: int) -> ParseError:
        """Build a located error for the current line."""
        return error_cls(
            message,
            lineno=self._lineno,
            col_offset=col,
            source_file=self._source_file,
            line=self._line,
        )
