"""Parse cache for Lore collections.

A parsed Document depends on three things: the source text, the file name
recorded in every node's location, and the ParseConfig fields that change
how lines are read. ``hash_content`` covers the first two and
``hash_config`` the third; together they key a ParseCache.

The typical client is a page generator that rebuilds a bookmarks page
whenever one of many ``.lore`` files is saved: unchanged files come back
from the cache instead of being lexed and folded again.

Example:
    >>> from lore import parse, DictParseCache
    >>> cache = DictParseCache()
    >>> first = parse("+ links", source_file="a.lore", cache=cache)
    >>> parse("+ links", source_file="a.lore", cache=cache) is first
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from lore.utils.hashing import hash_str

if TYPE_CHECKING:
    from lore.config import ParseConfig
    from lore.nodes import Document


class ParseCache(Protocol):
    """Anything that can store Documents under a (content, config) key pair.

    Documents are frozen, so one cached tree may be handed to any number of
    callers.
    """

    def get(self, content_hash: str, config_hash: str) -> Document | None: ...

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None: ...


class DictParseCache:
    """Unbounded in-process cache.

    Holds every Document it is given until ``clear()``. Guard it with a
    lock if several threads parse through the same instance.
    """

    __slots__ = ("_docs",)

    def __init__(self) -> None:
        self._docs: dict[tuple[str, str], Document] = {}

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        return self._docs.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        self._docs[(content_hash, config_hash)] = doc

    def clear(self) -> None:
        self._docs.clear()

    def __len__(self) -> int:
        return len(self._docs)


def hash_content(source: str, source_file: str | None = None) -> str:
    """Key for a source text as read from source_file (SHA-256 hex)."""
    if source_file is None:
        return hash_str(source)
    return hash_str(f"{source_file}\0{source}")


def hash_config(config: ParseConfig) -> str:
    """Key for the ParseConfig fields that affect parsing."""
    return hash_str(f"{config.tab_width}|{config.indent_step}|{config.comments_enabled}")


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]
