"""Tests for the tree visitor and transform utilities."""

import dataclasses

import pytest

from lore import parse
from lore.nodes import Atom, Document, Domain, Link, Node
from lore.visitor import BaseVisitor, transform

SOURCE = "+ search\n  ddg = https://duckduckgo.com\n  + more\n    [ an atom ]\nbare\ntop = https://t.com"


class LinkCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.targets: list[str] = []

    def visit_link(self, node: Link) -> None:
        self.targets.append(node.target)


class KindCounter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.seen: list[str] = []

    def visit_default(self, node: Node) -> None:
        self.seen.append(node.kind)


# =============================================================================
# Visitor dispatch tests
# =============================================================================


class TestVisitor:
    def test_collects_links_in_order(self) -> None:
        collector = LinkCollector()
        collector.visit(parse(SOURCE))
        assert collector.targets == ["https://duckduckgo.com", "https://t.com"]

    def test_visit_default_sees_every_node(self) -> None:
        counter = KindCounter()
        counter.visit(parse(SOURCE))
        assert counter.seen == [
            "document",
            "domain",
            "link",
            "domain",
            "atom",
            "atom",
            "link",
        ]

    def test_return_value(self) -> None:
        class Labeler(BaseVisitor[str]):
            def visit_domain(self, node: Domain) -> str:
                return node.label

            def visit_default(self, node: Node) -> str:
                return ""

        assert Labeler().visit(Domain("x")) == "x"
        assert Labeler().visit(Atom("y")) == ""

    def test_specific_visitor_does_not_call_default(self) -> None:
        class Both(BaseVisitor[None]):
            def __init__(self) -> None:
                self.atoms = 0
                self.others = 0

            def visit_atom(self, node: Atom) -> None:
                self.atoms += 1

            def visit_default(self, node: Node) -> None:
                self.others += 1

        visitor = Both()
        visitor.visit(parse("a\nb\n+ d\n  c"))
        assert visitor.atoms == 3
        assert visitor.others == 2  # document + domain


# =============================================================================
# Transform tests
# =============================================================================


class TestTransform:
    def test_identity_returns_same_tree(self) -> None:
        doc = parse(SOURCE)
        assert transform(doc, lambda node: node) is doc

    def test_remove_atoms(self) -> None:
        doc = parse(SOURCE)
        result = transform(doc, lambda node: None if isinstance(node, Atom) else node)
        assert [n.kind for n in result.walk()] == ["domain", "link", "domain", "link"]

    def test_rewrite_labels(self) -> None:
        def upper(node: Node) -> Node:
            if isinstance(node, Domain):
                return dataclasses.replace(node, label=node.label.upper())
            return node

        result = transform(parse("+ a\n  + b\n    x"), upper)
        assert result == Document(children=(Domain("A", (Domain("B", (Atom("x"),)),)),))

    def test_bottom_up_sees_new_children(self) -> None:
        def prune(node: Node) -> Node | None:
            if isinstance(node, Atom):
                return None
            if isinstance(node, Domain) and not node.children:
                return None
            return node

        result = transform(parse("+ a\n  + b\n    x\nkeep = y"), prune)
        assert result.children == (Link("keep", "y"),)

    def test_original_untouched(self) -> None:
        doc = parse(SOURCE)
        before = doc.walk()
        transform(doc, lambda node: None if isinstance(node, Link) else node)
        assert len(list(before)) == 6

    def test_removing_root_raises(self) -> None:
        with pytest.raises(TypeError, match="root"):
            transform(parse("a"), lambda node: None if isinstance(node, Document) else node)
