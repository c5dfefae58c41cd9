"""Indentation-stack parser producing the Lore node tree.

Consumes the LineToken stream from Lexer in a single forward pass and folds
it into nodes. Open domains live on an explicit FrameStack; a line closes
every domain whose header is not strictly shallower than it, then becomes a
child of whatever frame is left on top.

Indentation is relative: the first non-blank line sets the document's
baseline, and the first domain nesting sets the step size (unless
ParseConfig.indent_step fixes it). Every later line must sit exactly one
step below its domain header, or exactly level with its earlier siblings.

Thread Safety:
- Parser instances are single-use and not thread-safe
- Configuration is read from ContextVar (thread-local)
- The resulting nodes are immutable and safe to share

"""

from __future__ import annotations

from collections.abc import Iterable

from lore.config import ParseConfig, get_parse_config
from lore.errors import IndentError, MalformedLink, ParseError
from lore.lexer import Lexer
from lore.lexer.scanner import find_separator, read_atom
from lore.nodes import Atom, Link, Node
from lore.parsing.stack import Frame, FrameStack
from lore.tokens import LineKind, LineToken
from lore.utils.logger import get_logger

logger = get_logger(__name__)

_SKIPPED = frozenset({LineKind.BLANK, LineKind.COMMENT})


class Parser:
    """Indentation-stack parser for Lore.

    Usage:
        >>> parser = Parser("+ group\\n  a = https://a.com")
        >>> parser.parse()
        (Domain(label='group', children=(Link(key='a', target='https://a.com'),)),)

    Errors are fatal: the first structural problem raises a ParseError
    subclass and no nodes are returned.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_stack",
        "_step",
        "_baseline",
        "_line_count",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Lore source text
            source_file: Optional source file path for error messages

        """
        self._source = source
        self._source_file = source_file
        self._stack = FrameStack()
        self._step: int | None = self._config.indent_step
        self._baseline: LineToken | None = None
        self._line_count = 0

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    @property
    def step(self) -> int | None:
        """Indent step size in use (discovered or configured)."""
        return self._step

    def parse(self) -> tuple[Node, ...]:
        """Parse source into top-level nodes.

        Returns:
            Tuple of top-level nodes in source order

        Raises:
            ParseError: On the first lexical or structural error
        """
        lexer = Lexer(self._source, self._source_file)
        nodes = self.parse_tokens(lexer.tokenize())
        logger.debug(
            "Parsed %d lines into %d top-level nodes (indent step: %s)",
            self._line_count,
            len(nodes),
            self._step,
        )
        return nodes

    def parse_tokens(self, tokens: Iterable[LineToken]) -> tuple[Node, ...]:
        """Fold an already-lexed token stream into top-level nodes."""
        stack = self._stack
        for token in tokens:
            self._line_count += 1
            if token.kind in _SKIPPED:
                continue

            stack.close_until(token.indent)
            parent = stack.top
            self._check_indent(token, parent)

            if token.kind is LineKind.DOMAIN:
                stack.push(
                    Frame(
                        indent=token.indent,
                        label=token.value,
                        lineno=token.lineno,
                        location=token.location,
                    )
                )
            elif token.kind is LineKind.ATOM:
                parent.children.append(Atom(value=token.value, location=token.location))
            elif token.kind is LineKind.LINK:
                parent.children.append(self._parse_link(token))

        return stack.close_all()

    # =========================================================================
    # Indentation
    # =========================================================================

    def _check_indent(self, token: LineToken, parent: Frame) -> None:
        """Validate token's indent against its parent frame.

        Records the baseline / step size / sibling indent on first use.
        """
        indent = token.indent

        if parent.child_indent is None:
            if parent.is_document:
                self._baseline = token
            else:
                step = indent - parent.indent
                if self._step is None:
                    self._step = step
                elif step != self._step:
                    raise self._error(
                        IndentError,
                        f"expected indentation of {parent.indent + self._step} columns "
                        f"under the domain on line {parent.lineno} "
                        f"(step is {self._step}), found {indent}",
                        token,
                    )
            parent.child_indent = indent
            parent.child_lineno = token.lineno
            return

        if indent == parent.child_indent:
            return

        # Dedent below the baseline: the baseline line itself was indented
        # with no enclosing domain, so it is the line to fix.
        if parent.is_document and indent < parent.child_indent:
            baseline = self._baseline if self._baseline is not None else token
            raise self._error(
                IndentError,
                f"line is indented by {baseline.indent} columns without an enclosing "
                f"domain (line {token.lineno} returns to column {indent + 1})",
                baseline,
            )

        if indent > parent.child_indent:
            raise self._error(
                IndentError,
                f"indented deeper than its siblings (line {parent.child_lineno}); "
                "only a domain header may open a deeper level",
                token,
            )

        raise self._error(
            IndentError,
            f"inconsistent dedent: expected {parent.child_indent} columns to line up "
            f"with line {parent.child_lineno}, found {indent}",
            token,
        )

    # =========================================================================
    # Links
    # =========================================================================

    def _parse_link(self, token: LineToken) -> Link:
        """Split a LINK token on its first top-level ``=``."""
        payload = token.value
        sep = find_separator(payload)
        if sep == -1:
            raise self._error(MalformedLink, "link has no top-level '=' separator", token)

        key_text = payload[:sep].strip()
        after = payload[sep + 1 :]
        target_text = after.strip()
        target_col = token.col + sep + 1 + (len(after) - len(after.lstrip()))

        if not key_text:
            raise self._error(MalformedLink, "link key is empty", token)
        if not target_text:
            raise self._error(MalformedLink, "link target is empty", token, col=token.col + sep)

        key = read_atom(key_text)
        if key is None:
            raise self._error(
                MalformedLink,
                "link key must be a single atom (wrap text containing spaces in [ ... ])",
                token,
            )

        if target_text.startswith("["):
            target = read_atom(target_text)
            if target is None:
                raise self._error(
                    MalformedLink,
                    "bracketed link target must be a single [ ... ] atom",
                    token,
                    col=target_col,
                )
        elif any(c.isspace() for c in target_text):
            raise self._error(
                MalformedLink,
                "link target must be a single atom (wrap text containing spaces in [ ... ])",
                token,
                col=target_col,
            )
        else:
            target = target_text

        if not key:
            raise self._error(MalformedLink, "link key is empty after trimming", token)
        if not target:
            raise self._error(
                MalformedLink, "link target is empty after trimming", token, col=target_col
            )

        return Link(key=key, target=target, location=token.location)

    def _error(
        self,
        error_cls: type[ParseError],
        message: str,
        token: LineToken,
        *,
        col: int | None = None,
    ) -> ParseError:
        """Build a located error pointing at token's line."""
        return error_cls(
            message,
            lineno=token.lineno,
            col_offset=col if col is not None else token.col,
            source_file=self._source_file,
            line=token.line,
        )
