"""Line lexer for the Lore markup language.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (classifier composition + indentation)
├── scanner.py           # Bracket-aware splitting of line content
└── classifiers/         # One mixin per line form
    ├── comment.py       # # text (opt-in)
    ├── domain.py        # + label
    ├── link.py          # key = target
    └── atom.py          # [ text ] / bare_token

Usage:
    >>> from lore.lexer import Lexer
    >>> for token in Lexer("[ hello ]").tokenize():
    ...     print(token)
LineToken(ATOM, 'hello', 1:1, indent=0)

"""

from lore.lexer.core import Lexer

__all__ = ["Lexer"]
