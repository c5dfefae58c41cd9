"""Frame stack for indentation-scoped parsing.

Each open container (the document, or a domain whose scope has not ended)
is a Frame on the stack. A frame owns the indent range strictly deeper than
its header, and records the indent its first child established so later
siblings can be checked against it.

Usage:
    stack = FrameStack()          # Initializes with the document frame
    stack.push(Frame(indent=0, label="group", lineno=1))
    stack.close_until(2)          # Close frames that cannot own indent 2
    stack.top.children.append(node)
    children = stack.close_all()
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lore.location import SourceLocation
from lore.nodes import Domain, Node

DOCUMENT_INDENT = -1


@dataclass(slots=True)
class Frame:
    """An open container on the stack.

    Attributes:
        indent: Indent of the header line (-1 for the document)
        label: Domain label (empty for the document)
        lineno: Line of the header (0 for the document)
        location: Location of the header line
        children: Nodes collected so far, in source order
        child_indent: Indent of the first child, None until one arrives
        child_lineno: Line of the first child

    """

    indent: int
    label: str = ""
    lineno: int = 0
    location: SourceLocation = field(default_factory=SourceLocation.unknown)
    children: list[Node] = field(default_factory=list)
    child_indent: int | None = None
    child_lineno: int = 0

    @property
    def is_document(self) -> bool:
        return self.indent == DOCUMENT_INDENT

    def owns(self, indent: int) -> bool:
        """Does this frame's scope include a line at this indent?"""
        return indent > self.indent

    def seal(self) -> Domain:
        """Freeze the collected children into an immutable Domain."""
        return Domain(label=self.label, children=tuple(self.children), location=self.location)


@dataclass
class FrameStack:
    """Stack of open containers during parsing.

    Invariant: frames[0] is always the document frame, frames[-1] is the
    innermost open domain.

    """

    frames: list[Frame] = field(default_factory=lambda: [Frame(indent=DOCUMENT_INDENT)])

    @property
    def top(self) -> Frame:
        return self.frames[-1]

    @property
    def root(self) -> Frame:
        return self.frames[0]

    def push(self, frame: Frame) -> None:
        self.frames.append(frame)

    def close_top(self) -> None:
        """Pop the innermost domain and append it, sealed, to its parent."""
        frame = self.frames.pop()
        self.frames[-1].children.append(frame.seal())

    def close_until(self, indent: int) -> None:
        """Close every domain whose scope does not include this indent."""
        while len(self.frames) > 1 and not self.top.owns(indent):
            self.close_top()

    def close_all(self) -> tuple[Node, ...]:
        """Close all open domains and return the document's children."""
        while len(self.frames) > 1:
            self.close_top()
        return tuple(self.root.children)

    def __len__(self) -> int:
        return len(self.frames)
