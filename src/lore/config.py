"""ContextVar-based parse configuration for Lore.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The lexer and parser read the active config instead of taking options as
constructor arguments, so sub-components never need config threaded through.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Through the high-level API
    doc = parse(source, config=ParseConfig(indent_step=2))

    # Direct parser usage
    from lore.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(comments_enabled=True))
    try:
        nodes = Parser(source).parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(tab_width=8)):
        nodes = Parser(source).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is excluded, it is per-call state that stays on the
    Lexer and Parser instances.

    Attributes:
        tab_width: Tabs in indentation expand to the next multiple of this
        indent_step: Fixed indent step size. None discovers it from the
            first domain nesting in each document
        comments_enabled: Treat lines starting with ``#`` as comments

    """

    tab_width: int = 4
    indent_step: int | None = None
    comments_enabled: bool = False

    def __post_init__(self) -> None:
        if self.tab_width < 1:
            msg = f"tab_width must be positive, got {self.tab_width}"
            raise ValueError(msg)
        if self.indent_step is not None and self.indent_step < 1:
            msg = f"indent_step must be positive, got {self.indent_step}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "indent_step": 2,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.indent_step
            2

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "lore_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.

    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(indent_step=4)):
        ...     nodes = Parser("+ a\\n    b").parse()
        >>> # Previous config restored here

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
