"""Link line classifier mixin."""

from lore.lexer.scanner import find_separator
from lore.tokens import LineKind, LineToken


class LinkClassifierMixin:
    """Mixin providing ``key = target`` classification."""

    def _make_token(self, kind: LineKind, value: str, indent: int, col: int) -> LineToken:
        """Create token for the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_link(self, content: str, indent: int, col: int) -> LineToken | None:
        """Try to classify content as a link line.

        Any top-level ``=`` makes the line a link. Splitting and validating
        the two sides is left to the parser, so the token carries the whole
        trimmed line.

        Returns:
            LINK token if content has a top-level ``=``, None otherwise.
        """
        if find_separator(content) == -1:
            return None
        return self._make_token(LineKind.LINK, content, indent, col)
