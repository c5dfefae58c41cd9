"""ASTRenderer protocol, the stable interface for Lore renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``HtmlRenderer`` is the reference implementation.

Contract every renderer honors:

- Output depends only on the Document, never on the original source text
- Rendering is deterministic: the same tree gives byte-identical output
- An unrecognized node variant raises RenderError instead of being dropped

Example:
    from lore.renderers.protocol import ASTRenderer

    def publish(renderer: ASTRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from lore.nodes import Document


class ASTRenderer(Protocol):
    """Protocol for Document renderers."""

    def render(self, node: Document) -> str:
        """Render a Document to a string.

        Args:
            node: The document to render.

        Returns:
            Rendered string output.

        """
        ...
