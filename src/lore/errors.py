"""Exception classes for Lore.

Parsing is all-or-nothing: the first structural problem raises one of the
ParseError subclasses below and no Document is produced.
"""

from __future__ import annotations


class LoreError(Exception):
    """Base exception for all Lore errors."""

    pass


class ParseError(LoreError):
    """Error while turning Lore source into a Document.

    Carries enough location context (line, column, offending text) for an
    author to find and fix the line.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
        line: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
            line: Raw text of the offending line (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        self.line = line

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        text = f"{location}{message}"
        if line is not None:
            text += f"\n    {line}"
        super().__init__(text)


class LexicalError(ParseError):
    """A non-blank line matches none of the atom, link or domain forms."""


class IndentError(ParseError):
    """Indentation nests a line under a non-domain, or breaks the step size.

    Named to avoid shadowing the builtin ``IndentationError``.
    """


class MalformedLink(ParseError):
    """A link line has an empty or invalid side around its ``=``."""


class UnterminatedBracket(ParseError):
    """A ``[`` opens a bracketed atom that is never closed on its line."""


class RenderError(LoreError):
    """Error during rendering.

    Raised when a renderer meets a node variant it does not recognize.
    """

    pass
