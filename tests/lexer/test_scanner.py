"""Tests for bracket-aware line scanning."""

from lore.lexer.scanner import (
    PieceKind,
    find_separator,
    find_unclosed,
    is_bare_token,
    read_atom,
    scan_pieces,
)


class TestScanPieces:
    def test_mixed_pieces(self) -> None:
        pieces = scan_pieces("[ a = b ] = c")
        assert [p.kind for p in pieces] == [PieceKind.BRACKET, PieceKind.EQUALS, PieceKind.BARE]
        assert [p.text for p in pieces] == ["[ a = b ]", "=", "c"]

    def test_offsets(self) -> None:
        pieces = scan_pieces("ab  = [x]")
        assert [(p.start, p.end) for p in pieces] == [(0, 2), (4, 5), (6, 9)]

    def test_equals_splits_bare_runs(self) -> None:
        assert [p.text for p in scan_pieces("a=b")] == ["a", "=", "b"]

    def test_unclosed_ends_scan(self) -> None:
        pieces = scan_pieces("a [ b = c")
        assert pieces[-1].kind == PieceKind.UNCLOSED
        assert pieces[-1].text == "[ b = c"

    def test_whitespace_only(self) -> None:
        assert scan_pieces("   ") == []


class TestFinders:
    def test_find_separator_skips_brackets(self) -> None:
        assert find_separator("[ a = b ] = c") == 10

    def test_find_separator_missing(self) -> None:
        assert find_separator("[ x = y ]") == -1

    def test_find_unclosed(self) -> None:
        assert find_unclosed("a [ b") == 2
        assert find_unclosed("[ a ] b") == -1


class TestReadAtom:
    def test_bracketed_strips_padding(self) -> None:
        assert read_atom("[ hello ]") == "hello"
        assert read_atom("[hello]") == "hello"

    def test_inner_whitespace_is_kept(self) -> None:
        assert read_atom("[ a   b ]") == "a   b"

    def test_empty_brackets(self) -> None:
        assert read_atom("[]") == ""
        assert read_atom("[   ]") == ""

    def test_bare(self) -> None:
        assert read_atom("https://example.com") == "https://example.com"

    def test_closing_bracket_in_bare_token(self) -> None:
        assert read_atom("a]b") == "a]b"

    def test_not_a_single_atom(self) -> None:
        assert read_atom("two tokens") is None
        assert read_atom("=") is None
        assert read_atom("") is None
        assert read_atom("[ a ] b") is None


class TestIsBareToken:
    def test_valid(self) -> None:
        assert is_bare_token("abc")
        assert is_bare_token("https://a.com/x]")

    def test_invalid(self) -> None:
        assert not is_bare_token("")
        assert not is_bare_token("a b")
        assert not is_bare_token("a=b")
        assert not is_bare_token("[x")
