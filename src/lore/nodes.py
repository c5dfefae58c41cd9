"""Typed tree nodes for Lore.

All nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: the tree is read-only once the parser returns it
- Pattern matching: renderers and visitors dispatch with ``match``

Node Hierarchy:
Node (base)
├── Document   root, owns top-level nodes
├── Domain     + label, owns nested nodes
├── Link       key = target
└── Atom       [ text ] or bare_token

Equality is structural: ``location`` is excluded from comparison, so a tree
built by hand compares equal to the same tree produced by the parser.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar

from lore.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes.

    Every node tracks the source line it came from. Hand-built nodes get an
    unknown location.

    """

    kind: ClassVar[str] = "node"

    location: SourceLocation = field(
        default_factory=SourceLocation.unknown,
        compare=False,
        repr=False,
        kw_only=True,
    )


@dataclass(frozen=True, slots=True)
class Atom(Node):
    """A single value.

    Lore: ``[ free text ]`` or ``bare_token``

    """

    kind: ClassVar[str] = "atom"

    value: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """A labelled reference.

    Lore: ``key = target``
    HTML: <a href="target">key</a>

    """

    kind: ClassVar[str] = "link"

    key: str
    target: str


@dataclass(frozen=True, slots=True)
class Domain(Node):
    """A named grouping of nested nodes.

    Lore::

        + label
          child
          child

    """

    kind: ClassVar[str] = "domain"

    label: str
    children: tuple[Node, ...] = ()

    def walk(self) -> Iterator[Node]:
        """Yield all descendants depth-first, in source order."""
        for child in self.children:
            yield child
            if isinstance(child, Domain):
                yield from child.walk()


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root of a parsed Lore file.

    Children are in display order, which is source order.

    """

    kind: ClassVar[str] = "document"

    children: tuple[Node, ...] = ()

    def walk(self) -> Iterator[Node]:
        """Yield every node in the tree depth-first, in source order."""
        for child in self.children:
            yield child
            if isinstance(child, Domain):
                yield from child.walk()

    def depth(self) -> int:
        """Maximum domain nesting depth (0 when there are no domains)."""
        return _depth(self.children)


def _depth(children: tuple[Node, ...]) -> int:
    best = 0
    for child in children:
        if isinstance(child, Domain):
            best = max(best, 1 + _depth(child.children))
    return best


__all__ = ["Atom", "Document", "Domain", "Link", "Node"]
