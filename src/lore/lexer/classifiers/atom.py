"""Atom line classifier mixin."""

from lore.lexer.scanner import read_atom
from lore.tokens import LineKind, LineToken


class AtomClassifierMixin:
    """Mixin providing ``[ text ]`` / bare token classification."""

    def _make_token(self, kind: LineKind, value: str, indent: int, col: int) -> LineToken:
        """Create token for the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_atom(self, content: str, indent: int, col: int) -> LineToken | None:
        """Try to classify content as a single atom.

        Returns:
            ATOM token carrying the atom value, None if content is not
            exactly one atom.
        """
        value = read_atom(content)
        if value is None:
            return None
        return self._make_token(LineKind.ATOM, value, indent, col)
