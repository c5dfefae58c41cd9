"""Source location tracking for error messages and debugging.

Every node and line token carries a SourceLocation so errors and tooling can
point back at the originating line of the ``.lore`` file.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a line (or part of one) in Lore source.

    All positions are 1-indexed.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column where the line's content starts (1-indexed)
        end_col_offset: Column just past the content (optional)
        source_file: Source file path (optional)

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=5)
        >>> str(loc)
        '3:5'
        >>> str(SourceLocation(1, 1, source_file="links.lore"))
        'links.lore:1:1'

    """

    lineno: int
    col_offset: int
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.lore:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Used for nodes built by hand or by transforms.
        """
        return cls(lineno=0, col_offset=0)
