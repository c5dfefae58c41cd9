"""Comment line classifier mixin (opt-in via ``comments_enabled``)."""

from lore.tokens import LineKind, LineToken


class CommentClassifierMixin:
    """Mixin providing ``# text`` classification."""

    _comments_enabled: bool

    def _make_token(self, kind: LineKind, value: str, indent: int, col: int) -> LineToken:
        """Create token for the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_comment(self, content: str, indent: int, col: int) -> LineToken | None:
        """Try to classify content as a comment.

        Returns:
            COMMENT token with the text after ``#``, None if comments are
            disabled or content does not start with ``#``.
        """
        if not self._comments_enabled or not content.startswith("#"):
            return None
        return self._make_token(LineKind.COMMENT, content[1:].strip(), indent, col)
