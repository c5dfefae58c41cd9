"""Lore renderers.

Renderers convert a parsed Document into an output format.

Available Renderers:
- HtmlRenderer: collapsible ``<details>`` HTML, as a fragment or a full page
- LoreRenderer: canonical Lore source (parses back to an equal Document)

JSON output lives in ``lore.serialization``.

Thread Safety:
All renderers keep per-render state local to each render() call.

"""

from lore.renderers.html import DomainInfo, HtmlRenderer
from lore.renderers.protocol import ASTRenderer
from lore.renderers.source import LoreRenderer

__all__ = ["ASTRenderer", "DomainInfo", "HtmlRenderer", "LoreRenderer"]
