"""Parsing support for Lore.

Provides the frame stack the parser uses to track open domains.
"""

from lore.parsing.stack import DOCUMENT_INDENT, Frame, FrameStack

__all__ = ["DOCUMENT_INDENT", "Frame", "FrameStack"]
