"""Error-path tests.

Exercise exception formatting and the all-or-nothing contract of parse():
a malformed line raises exactly one located error and no Document.
"""

import pytest

from lore import parse
from lore.errors import (
    IndentError,
    LexicalError,
    LoreError,
    MalformedLink,
    ParseError,
    RenderError,
    UnterminatedBracket,
)

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected line")
        assert str(err) == "unexpected line"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad syntax", lineno=42)
        assert str(err) == "42 bad syntax"

    def test_with_line_and_column(self) -> None:
        err = ParseError("missing bracket", lineno=10, col_offset=5)
        assert str(err) == "10:5 missing bracket"

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=1, col_offset=1, source_file="links.lore")
        assert str(err) == "links.lore:1:1 error"

    def test_with_offending_line(self) -> None:
        err = ParseError("error", lineno=3, col_offset=1, line="hello world")
        assert str(err) == "3:1 error\n    hello world"
        assert err.message == "error"


# =========================================================================
# Hierarchy
# =========================================================================


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_cls", [LexicalError, IndentError, MalformedLink, UnterminatedBracket]
    )
    def test_parse_error_subclasses(self, error_cls: type[ParseError]) -> None:
        err = error_cls("x", lineno=1)
        assert isinstance(err, ParseError)
        assert isinstance(err, LoreError)

    def test_indent_error_is_not_builtin(self) -> None:
        assert not issubclass(IndentError, IndentationError)

    def test_render_error_is_lore_error(self) -> None:
        assert isinstance(RenderError("x"), LoreError)
        assert not isinstance(RenderError("x"), ParseError)


# =========================================================================
# Error locality through parse()
# =========================================================================


class TestErrorLocality:
    """Errors reference the malformed line, in the right file."""

    @pytest.mark.parametrize(
        ("source", "error_cls", "lineno"),
        [
            ("a\nb c\nd", LexicalError, 2),
            ("+ g\n  [ open", UnterminatedBracket, 2),
            ("+ g\n  x\n  a = b c", MalformedLink, 3),
            ("a\n  b", IndentError, 2),
        ],
    )
    def test_error_line(self, source: str, error_cls: type[ParseError], lineno: int) -> None:
        with pytest.raises(error_cls) as exc_info:
            parse(source)
        assert exc_info.value.lineno == lineno

    def test_source_file_in_message(self) -> None:
        with pytest.raises(LexicalError) as exc_info:
            parse("a\nhello world", source_file="links.lore")
        assert str(exc_info.value).startswith("links.lore:2:1 ")
        assert exc_info.value.line == "hello world"

    def test_first_error_wins(self) -> None:
        with pytest.raises(LexicalError) as exc_info:
            parse("ok\nbad one\nbad two")
        assert exc_info.value.lineno == 2
