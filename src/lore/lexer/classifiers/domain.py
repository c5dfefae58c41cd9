"""Domain header classifier mixin."""

from lore.lexer.scanner import read_atom
from lore.tokens import LineKind, LineToken


class DomainClassifierMixin:
    """Mixin providing ``+ label`` classification."""

    def _make_token(self, kind: LineKind, value: str, indent: int, col: int) -> LineToken:
        """Create token for the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_domain(self, content: str, indent: int, col: int) -> LineToken | None:
        """Try to classify content as a domain header.

        A header is ``+``, then whitespace, then exactly one atom. ``+x`` and
        a lone ``+`` are not headers; they fall through to the atom form.

        Args:
            content: Line content with surrounding whitespace stripped
            indent: Leading whitespace width of the line
            col: Column where content starts

        Returns:
            DOMAIN token if content is a header, None otherwise.
        """
        if len(content) < 2 or content[0] != "+" or not content[1].isspace():
            return None

        label = read_atom(content[1:])
        if label is None:
            return None
        return self._make_token(LineKind.DOMAIN, label, indent, col)
