"""Tree Visitor and Transformer for Lore.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees.

Example: collect every link target:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.targets: list[str] = []

        def visit_link(self, node: Link) -> None:
            self.targets.append(node.target)

    collector = LinkCollector()
    collector.visit(doc)

Example: drop empty domains:

    def prune(node: Node) -> Node | None:
        if isinstance(node, Domain) and not node.children:
            return None
        return node

    new_doc = transform(doc, prune)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable
from typing import Generic, TypeVar

from lore.nodes import Atom, Document, Domain, Link, Node


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call, in source order.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method.

        Default returns None (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_domain(self, node: Domain) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_atom(self, node: Atom) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Document():
                return self.visit_document(node)
            case Domain():
                return self.visit_domain(node)
            case Link():
                return self.visit_link(node)
            case Atom():
                return self.visit_atom(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Document(children=children) | Domain(children=children):
                for child in children:
                    self.visit(child)
            case _:
                pass  # Leaf nodes: no children


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children. This ensures ``fn``
    always receives nodes with already-transformed children.

    Return ``None`` from ``fn`` to remove a node from the tree. The root
    Document cannot be removed; returning None for it raises TypeError.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Document with the transformation applied.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    return fn(_transform_children(node, fn))


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Produce a new node with children transformed; removed nodes are dropped."""
    match node:
        case Document(children=children) | Domain(children=children):
            new_children = tuple(
                result for c in children if (result := _transform_node(c, fn)) is not None
            )
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case _:
            pass  # Leaf nodes: return as-is

    return node


__all__ = ["BaseVisitor", "transform"]
