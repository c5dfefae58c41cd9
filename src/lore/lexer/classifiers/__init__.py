"""Line classifier mixins for the Lore lexer.

Each mixin tries one syntactic form and returns a LineToken or None.
Classifiers are pure: they never advance the lexer.
"""

from lore.lexer.classifiers.atom import AtomClassifierMixin
from lore.lexer.classifiers.comment import CommentClassifierMixin
from lore.lexer.classifiers.domain import DomainClassifierMixin
from lore.lexer.classifiers.link import LinkClassifierMixin

__all__ = [
    "AtomClassifierMixin",
    "CommentClassifierMixin",
    "DomainClassifierMixin",
    "LinkClassifierMixin",
]
