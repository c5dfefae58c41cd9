"""Tests for the canonical Lore source renderer."""

import pytest

from lore import parse
from lore.errors import RenderError
from lore.nodes import Atom, Document, Domain, Link
from lore.renderers.source import LoreRenderer, format_atom, format_target


def _render(*children) -> str:  # type: ignore[no-untyped-def]
    return LoreRenderer().render(Document(children=tuple(children)))


class TestCanonicalForm:
    def test_normalizes_spacing(self) -> None:
        doc = parse("+   [ my links ]\n    a   =   https://a.com\n    [x]")
        assert LoreRenderer().render(doc) == "+ [ my links ]\n  a = https://a.com\n  x\n"

    def test_indent_width(self) -> None:
        doc = parse("+ a\n  + b\n    c")
        assert LoreRenderer(indent_width=4).render(doc) == "+ a\n    + b\n        c\n"

    def test_empty_document(self) -> None:
        assert _render() == ""

    def test_empty_domain(self) -> None:
        assert _render(Domain("a"), Atom("b")) == "+ a\nb\n"


class TestAtomFormatting:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("plain", "plain"),
            ("two words", "[ two words ]"),
            ("a=b", "[ a=b ]"),
            ("[x", "[ [x ]"),
            ("#tag", "[ #tag ]"),
            ("", "[ ]"),
            ("a]b", "a]b"),
        ],
    )
    def test_format_atom(self, value: str, expected: str) -> None:
        assert format_atom(value) == expected

    def test_unrepresentable_value(self) -> None:
        with pytest.raises(RenderError):
            format_atom("a ] b")


class TestTargetFormatting:
    def test_query_string_stays_bare(self) -> None:
        assert format_target("https://x.com/?a=1") == "https://x.com/?a=1"

    def test_whitespace_is_bracketed(self) -> None:
        assert format_target("see here") == "[ see here ]"

    def test_leading_bracket_is_bracketed(self) -> None:
        assert format_target("[x") == "[ [x ]"

    @pytest.mark.parametrize("target", ["=[", "a=[b"])
    def test_unclosed_bracket_after_equals_is_bracketed(self, target: str) -> None:
        doc = Document(children=(Link(key="0", target=target),))
        text = LoreRenderer().render(doc)
        assert text == f"0 = [ {target} ]\n"
        assert parse(text) == doc

    def test_closed_bracket_after_equals_stays_bare(self) -> None:
        assert format_target("a=[b]") == "a=[b]"
        assert parse("0 = a=[b]\n").children[0] == Link(key="0", target="a=[b]")

    def test_link_line(self) -> None:
        assert _render(Link("my site", "https://x.com")) == "[ my site ] = https://x.com\n"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "source",
        [
            "[ hello ]",
            "name = https://example.com",
            "+ group\n  a = https://a.com\n  b = https://b.com",
            "+ outer\n  + inner\n    atom",
            "[ a = b ] = [ c d ]\nq = https://x.com/?a=1&b=2",
            "    +   [ 搜索 ]\n        [ ]\n        +x\n    tail",
            "+ [ ]\n  + = x\n  [ [y ]",
        ],
    )
    def test_parse_render_parse(self, source: str) -> None:
        doc = parse(source)
        assert parse(LoreRenderer().render(doc)) == doc

    def test_render_is_fixed_point(self) -> None:
        text = LoreRenderer().render(parse("+  a\n     b =  c"))
        assert LoreRenderer().render(parse(text)) == text


class TestContract:
    def test_non_document_raises(self) -> None:
        with pytest.raises(RenderError):
            LoreRenderer().render(Domain("x"))  # type: ignore[arg-type]

    def test_invalid_indent_width(self) -> None:
        with pytest.raises(ValueError, match="indent_width"):
            LoreRenderer(indent_width=0)
