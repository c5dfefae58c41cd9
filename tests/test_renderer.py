"""Tests for the HTML renderer."""

from dataclasses import dataclass

import pytest

from lore import parse, render
from lore.errors import RenderError
from lore.nodes import Atom, Document, Domain, Node
from lore.renderers.html import DEFAULT_STYLESHEET, DomainInfo, HtmlRenderer


@dataclass(frozen=True, slots=True)
class Unknown(Node):
    """A node variant no renderer knows about."""


class TestNodeRendering:
    def test_atom(self) -> None:
        assert render(parse("[ hello ]")) == '<p class="atom">hello</p>\n'

    def test_link(self) -> None:
        html = render(parse("name = https://example.com"))
        assert html == (
            '<a class="link" href="https://example.com" target="_blank">name</a>\n'
        )

    def test_domain(self) -> None:
        html = render(parse("+ group\n  a = https://a.com\n  b = https://b.com"))
        assert html == (
            '<details id="group" open>\n'
            "  <summary>group</summary>\n"
            '  <div class="domain">\n'
            '    <a class="link" href="https://a.com" target="_blank">a</a>\n'
            '    <a class="link" href="https://b.com" target="_blank">b</a>\n'
            "  </div>\n"
            "</details>\n"
        )

    def test_empty_domain_has_no_body(self) -> None:
        html = render(parse("+ empty"))
        assert html == '<details id="empty" open>\n  <summary>empty</summary>\n</details>\n'

    def test_document_order(self) -> None:
        html = render(parse("b\na\nc"))
        assert html.index(">b<") < html.index(">a<") < html.index(">c<")

    def test_empty_document(self) -> None:
        assert render(Document()) == ""


class TestEscaping:
    def test_atom_text(self) -> None:
        html = render(parse("[ <b>&</b> ]"))
        assert html == '<p class="atom">&lt;b&gt;&amp;&lt;/b&gt;</p>\n'

    def test_href_quotes(self) -> None:
        html = render(parse('k = x"y'))
        assert 'href="x&quot;y"' in html

    def test_label(self) -> None:
        html = render(parse("+ [ <script> ]"))
        assert "<summary>&lt;script&gt;</summary>" in html


class TestDomains:
    def test_nested_domains_start_collapsed(self) -> None:
        html = render(parse("+ outer\n  + inner\n    x"))
        assert '<details id="outer" open>' in html
        assert '<details id="inner">' in html

    def test_open_depth(self) -> None:
        doc = parse("+ outer\n  + inner\n    x")
        assert '<details id="inner" open>' in HtmlRenderer(open_depth=2).render(doc)
        assert " open" not in HtmlRenderer(open_depth=0).render(doc)

    def test_duplicate_labels_get_unique_ids(self) -> None:
        html = render(parse("+ a\n+ a\n+ a"))
        assert 'id="a"' in html
        assert 'id="a-1"' in html
        assert 'id="a-2"' in html

    def test_unicode_label_slug(self) -> None:
        assert 'id="搜索-引擎"' in render(parse("+ [ 搜索 引擎 ]"))

    def test_symbol_only_label_falls_back(self) -> None:
        assert 'id="domain"' in render(parse("+ ***"))

    def test_custom_slugify(self) -> None:
        renderer = HtmlRenderer(slugify=lambda text: "x-" + text)
        assert 'id="x-group"' in renderer.render(parse("+ group"))

    def test_get_domains(self) -> None:
        renderer = HtmlRenderer()
        renderer.render(parse("+ outer\n  + inner\n    x\n+ outer"))
        assert renderer.get_domains() == [
            DomainInfo(depth=1, label="outer", slug="outer"),
            DomainInfo(depth=2, label="inner", slug="inner"),
            DomainInfo(depth=1, label="outer", slug="outer-1"),
        ]

    def test_get_domains_before_render(self) -> None:
        assert HtmlRenderer().get_domains() == []


class TestPage:
    def test_page_structure(self) -> None:
        html = render(parse("x"), page=True, title="links")
        assert html.startswith("<!DOCTYPE html>\n<html>\n<head>\n")
        assert "  <title>links</title>\n" in html
        assert f'<link rel="stylesheet" href="{DEFAULT_STYLESHEET}">' in html
        assert "  <details open>\n    <summary>links</summary>\n" in html
        assert '      <p class="atom">x</p>\n' in html
        assert html.endswith("</body>\n</html>\n")

    def test_default_title(self) -> None:
        assert "<title>lore</title>" in render(Document(), page=True)

    def test_title_is_escaped(self) -> None:
        assert "<title>a &amp; b</title>" in render(Document(), page=True, title="a & b")

    def test_without_stylesheet(self) -> None:
        html = HtmlRenderer(page=True, stylesheet=None).render(Document())
        assert "stylesheet" not in html


class TestRendererContract:
    def test_unknown_node_raises(self) -> None:
        doc = Document(children=(Atom("ok"), Unknown()))
        with pytest.raises(RenderError, match="Unknown"):
            HtmlRenderer().render(doc)

    def test_unknown_node_inside_domain_raises(self) -> None:
        doc = Document(children=(Domain("d", (Unknown(),)),))
        with pytest.raises(RenderError):
            HtmlRenderer().render(doc)

    def test_non_document_raises(self) -> None:
        with pytest.raises(RenderError):
            HtmlRenderer().render(Atom("x"))  # type: ignore[arg-type]

    def test_idempotent(self) -> None:
        doc = parse("+ a\n  + a\n    x = y")
        renderer = HtmlRenderer(page=True)
        assert renderer.render(doc) == renderer.render(doc)

    def test_hand_built_tree_renders_like_parsed(self) -> None:
        built = Document(children=(Domain("g", (Atom("x"),)),))
        assert render(built) == render(parse("+ g\n  x"))
