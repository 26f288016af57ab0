"""Position utilities for patterns.

Converts character offsets to line/column positions for error reporting.
Patterns are usually single-line, but may embed newlines.
"""

from strftimeengine.diagnostics import SourceSpan

__all__ = ["column_offset", "line_offset", "span_at"]


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Args:
        source: Complete pattern text
        pos: Character offset in source

    Returns:
        0-based line number

    Example:
        >>> source = "%Y\\n%m\\n%d"
        >>> line_offset(source, 0)
        0
        >>> line_offset(source, 3)
        1
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))  # Clamp to source length

    return source.count("\n", 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    Args:
        source: Complete pattern text
        pos: Character offset in source

    Returns:
        0-based column number (characters from line start)

    Example:
        >>> column_offset("date: %Q", 6)
        6
        >>> column_offset("a\\n%Q", 2)
        0
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))  # Clamp to source length

    line_start = source.rfind("\n", 0, pos)
    return pos - (line_start + 1)


def span_at(source: str, start: int, length: int) -> SourceSpan:
    """Build a 1-indexed SourceSpan covering ``length`` characters at ``start``."""
    end = min(start + length, len(source))
    return SourceSpan(
        start=start,
        end=end,
        line=line_offset(source, start) + 1,
        column=column_offset(source, start) + 1,
    )
