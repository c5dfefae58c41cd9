"""
Lore: indentation-structured markup for link collections.

A ``.lore`` file describes nested information with three kinds of line:
atoms (``[ free text ]`` or ``bare_token``), links (``key = target``) and
domains (``+ label`` followed by an indented block). Lore parses it into an
immutable, typed tree and renders that tree as collapsible HTML, canonical
Lore source, or JSON.

Quick Start:
    >>> from lore import parse, render
    >>> doc = parse("+ search\\n  ddg = https://duckduckgo.com")
    >>> print(render(doc), end="")
    <details id="search" open>
      <summary>search</summary>
      <div class="domain">
        <a class="link" href="https://duckduckgo.com" target="_blank">ddg</a>
      </div>
    </details>

    >>> # Or use the high-level Lore class
    >>> from lore import Lore
    >>> page = Lore(page=True, title="bookmarks")
    >>> html = page("+ search\\n  ddg = https://duckduckgo.com")

Installation:
    pip install lore                 # Parser, renderers and CLI (zero deps)
"""

from collections.abc import Iterable

from lore.cache import DictParseCache, ParseCache, hash_config, hash_content
from lore.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from lore.errors import (
    IndentError,
    LexicalError,
    LoreError,
    MalformedLink,
    ParseError,
    RenderError,
    UnterminatedBracket,
)
from lore.lexer import Lexer
from lore.location import SourceLocation
from lore.nodes import Atom, Document, Domain, Link, Node
from lore.parser import Parser
from lore.renderers.html import DomainInfo, HtmlRenderer
from lore.renderers.protocol import ASTRenderer
from lore.renderers.source import LoreRenderer
from lore.serialization import from_dict, from_json, to_dict, to_json
from lore.tokens import LineKind, LineToken
from lore.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
    cache: ParseCache | None = None,
) -> Document:
    """Parse Lore source into a typed tree.

    Args:
        source: Lore source text
        source_file: Optional source file path for error messages
        config: Parse configuration (defaults to ParseConfig())
        cache: Optional content-addressed parse cache. When provided, checks
            cache before parsing; on miss, parses and stores result.

    Returns:
        Document root node

    Raises:
        ParseError: On the first lexical or structural error. No partial
            document is returned.

    Example:
        >>> doc = parse("+ group\\n  [ an atom ]")
        >>> doc.children[0]
        Domain(label='group', children=(Atom(value='an atom'),))
    """
    set_parse_config(config or ParseConfig())
    try:
        return _parse_one(source, source_file, cache)
    finally:
        reset_parse_config()


def _parse_one(source: str, source_file: str | None, cache: ParseCache | None) -> Document:
    """Parse under the already-active config, consulting cache if given."""
    if cache is not None:
        config_hash = hash_config(get_parse_config())
        content_hash = hash_content(source, source_file)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            return cached

    parser = Parser(source, source_file=source_file)
    children = parser.parse()
    loc = SourceLocation(lineno=1, col_offset=1, source_file=source_file)
    doc = Document(location=loc, children=children)

    if cache is not None:
        cache.put(content_hash, config_hash, doc)

    return doc


def render(doc: Document, *, page: bool = False, title: str | None = None) -> str:
    """Render a Document to HTML.

    Args:
        doc: Document to render
        page: Wrap the output in a complete HTML page
        title: Page title (page mode only, defaults to "lore")

    Returns:
        HTML string
    """
    return HtmlRenderer(page=page, title=title).render(doc)


class Lore:
    """High-level Lore processor combining parser and HTML renderer.

    Usage:
        >>> lore = Lore()
        >>> html = lore("+ group\\n  a = https://a.com")

        >>> # Access the tree
        >>> doc = lore.parse("+ group")
        >>> doc.children[0].label
        'group'

        >>> # Fixed indent step, comments allowed
        >>> lore = Lore(config=ParseConfig(indent_step=2, comments_enabled=True))

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Lore instances concurrently from different threads.

    """

    __slots__ = ("_config", "_page", "_title")

    def __init__(
        self,
        *,
        config: ParseConfig | None = None,
        page: bool = False,
        title: str | None = None,
    ) -> None:
        self._config = config or ParseConfig()
        self._page = page
        self._title = title

    def __call__(self, source: str) -> str:
        """Parse and render Lore in one call."""
        return self.render(self.parse(source))

    def parse(
        self,
        source: str,
        *,
        source_file: str | None = None,
        cache: ParseCache | None = None,
    ) -> Document:
        """Parse Lore source into a Document using this processor's config."""
        set_parse_config(self._config)
        try:
            return _parse_one(source, source_file, cache)
        finally:
            reset_parse_config()

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
        cache: ParseCache | None = None,
    ) -> list[Document]:
        """Parse multiple Lore sources.

        Sets config once, parses all, resets once. When cache is provided,
        duplicate sources within the batch hit cache.

        Raises:
            ParseError: From the first source that fails to parse
        """
        set_parse_config(self._config)
        try:
            return [_parse_one(source, source_file, cache) for source in sources]
        finally:
            reset_parse_config()

    def render(self, doc: Document) -> str:
        """Render a Document to HTML."""
        return HtmlRenderer(page=self._page, title=self._title).render(doc)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    # Parse cache
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
    # Nodes
    "Node",
    "Document",
    "Domain",
    "Link",
    "Atom",
    # Errors
    "LoreError",
    "ParseError",
    "LexicalError",
    "IndentError",
    "MalformedLink",
    "UnterminatedBracket",
    "RenderError",
    # Parser components
    "Lexer",
    "LineKind",
    "LineToken",
    "Parser",
    # Renderers
    "ASTRenderer",
    "DomainInfo",
    "HtmlRenderer",
    "LoreRenderer",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Location
    "SourceLocation",
    # High-level
    "Lore",
]
