"""Hypothesis strategies for strftimeengine property-based testing.

Strategies are organized by domain:

- patterns: literal text, directive characters, patterns, timestamps

Usage:
    from tests.strategies import valid_patterns, timestamps
"""

from .patterns import (
    BUILTIN_DIRECTIVE_CHARS,
    aware_timestamps,
    builtin_directive_chars,
    fixed_offsets,
    literal_text,
    naive_timestamps,
    non_empty_literal_text,
    timestamps,
    unregistered_chars,
    valid_patterns,
)

__all__ = [
    "BUILTIN_DIRECTIVE_CHARS",
    "aware_timestamps",
    "builtin_directive_chars",
    "fixed_offsets",
    "literal_text",
    "naive_timestamps",
    "non_empty_literal_text",
    "timestamps",
    "unregistered_chars",
    "valid_patterns",
]
