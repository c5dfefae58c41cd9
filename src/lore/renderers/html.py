"""HTML renderer using StringBuilder pattern.

Renders the Lore tree as nested, collapsible ``<details>`` elements:

- Atom   → ``<p class="atom">value</p>``
- Link   → ``<a class="link" href="target" target="_blank">key</a>``
- Domain → ``<details id="slug"><summary>label</summary>…</details>``

Output is either a fragment or, with ``page=True``, a complete HTML5 page
that links the collection stylesheet.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from lore.errors import RenderError
from lore.nodes import Atom, Document, Domain, Link, Node
from lore.stringbuilder import StringBuilder
from lore.utils.logger import get_logger
from lore.utils.text import escape_html
from lore.utils.text import slugify as default_slugify

logger = get_logger(__name__)

DEFAULT_STYLESHEET = "https://fleetinglore.github.io/collection/collection.css"
DEFAULT_TITLE = "lore"


@dataclass(frozen=True, slots=True)
class DomainInfo:
    """Domain metadata collected during rendering.

    Used to build a table of contents without re-walking the tree.
    """

    depth: int
    label: str
    slug: str


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render() call, so concurrent renders never share
    slug bookkeeping.
    """

    domains: list[DomainInfo] = field(default_factory=list)
    seen_slugs: set[str] = field(default_factory=set)


class HtmlRenderer:
    """Render a Lore Document to HTML.

    Usage:
        >>> from lore import parse
        >>> doc = parse("+ group\\n  a = https://a.com")
        >>> print(HtmlRenderer().render(doc), end="")
        <details id="group" open>
          <summary>group</summary>
          <div class="domain">
            <a class="link" href="https://a.com" target="_blank">a</a>
          </div>
        </details>

    Args:
        page: Wrap the fragment in a complete HTML page
        title: Page title and top-level summary text (page mode only)
        stylesheet: Stylesheet URL linked from the page head, or None
        open_depth: Domains nested at most this deep render expanded
        slugify: Optional custom slug function for domain ids

    """

    __slots__ = (
        "_page",
        "_title",
        "_stylesheet",
        "_open_depth",
        "_slugify",
        "_last_context",
    )

    def __init__(
        self,
        *,
        page: bool = False,
        title: str | None = None,
        stylesheet: str | None = DEFAULT_STYLESHEET,
        open_depth: int = 1,
        slugify: Callable[[str], str] | None = None,
    ) -> None:
        self._page = page
        self._title = title or DEFAULT_TITLE
        self._stylesheet = stylesheet
        self._open_depth = open_depth
        self._slugify = slugify or default_slugify
        self._last_context: RenderContext | None = None

    def render(self, node: Document) -> str:
        """Render document to an HTML string.

        Raises:
            RenderError: If node is not a Document or the tree contains a
                node variant this renderer does not know
        """
        if not isinstance(node, Document):
            msg = f"HtmlRenderer.render() expects a Document, got {type(node).__name__}"
            raise RenderError(msg)

        ctx = RenderContext()
        sb = StringBuilder(indent="  ")

        if self._page:
            self._open_page(sb)
            for child in node.children:
                self._render_node(child, sb, ctx, level=3, depth=1)
            self._close_page(sb)
        else:
            for child in node.children:
                self._render_node(child, sb, ctx, level=0, depth=1)

        self._last_context = ctx
        logger.debug("Rendered %d domains to HTML", len(ctx.domains))
        return sb.build()

    def get_domains(self) -> list[DomainInfo]:
        """Domain info collected during the last render() call.

        Returns:
            Domains in document order; empty if render() hasn't been called.
        """
        if self._last_context is None:
            return []
        return self._last_context.domains.copy()

    # =========================================================================
    # Node rendering
    # =========================================================================

    def _render_node(
        self, node: Node, sb: StringBuilder, ctx: RenderContext, level: int, depth: int
    ) -> None:
        match node:
            case Atom(value=value):
                sb.line(level, f'<p class="atom">{escape_html(value)}</p>')
            case Link(key=key, target=target):
                sb.line(
                    level,
                    f'<a class="link" href="{escape_html(target)}" target="_blank">'
                    f"{escape_html(key)}</a>",
                )
            case Domain():
                self._render_domain(node, sb, ctx, level, depth)
            case _:
                msg = f"Cannot render node of type {type(node).__name__}"
                raise RenderError(msg)

    def _render_domain(
        self, domain: Domain, sb: StringBuilder, ctx: RenderContext, level: int, depth: int
    ) -> None:
        slug = self._unique_slug(domain.label, ctx)
        ctx.domains.append(DomainInfo(depth=depth, label=domain.label, slug=slug))

        open_attr = " open" if depth <= self._open_depth else ""
        sb.line(level, f'<details id="{escape_html(slug)}"{open_attr}>')
        sb.line(level + 1, f"<summary>{escape_html(domain.label)}</summary>")
        if domain.children:
            sb.line(level + 1, '<div class="domain">')
            for child in domain.children:
                self._render_node(child, sb, ctx, level + 2, depth + 1)
            sb.line(level + 1, "</div>")
        sb.line(level, "</details>")

    def _unique_slug(self, label: str, ctx: RenderContext) -> str:
        slug = self._slugify(label)
        original = slug
        counter = 1
        while slug in ctx.seen_slugs:
            slug = f"{original}-{counter}"
            counter += 1
        ctx.seen_slugs.add(slug)
        return slug

    # =========================================================================
    # Page chrome
    # =========================================================================

    def _open_page(self, sb: StringBuilder) -> None:
        title = escape_html(self._title)
        sb.line(0, "<!DOCTYPE html>")
        sb.line(0, "<html>")
        sb.line(0, "<head>")
        sb.line(1, '<meta charset="UTF-8">')
        sb.line(1, '<meta name="viewport" content="width=device-width, initial-scale=1.0">')
        sb.line(1, f"<title>{title}</title>")
        if self._stylesheet:
            sb.line(1, f'<link rel="stylesheet" href="{escape_html(self._stylesheet)}">')
        sb.line(0, "</head>")
        sb.line(0, "<body>")
        sb.line(1, "<details open>")
        sb.line(2, f"<summary>{title}</summary>")
        sb.line(2, '<div class="document">')

    def _close_page(self, sb: StringBuilder) -> None:
        sb.line(2, "</div>")
        sb.line(1, "</details>")
        sb.line(0, "</body>")
        sb.line(0, "</html>")
