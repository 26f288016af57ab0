"""Core types shared across syntax and runtime layers.

Provides the renderer variants and the directive table without creating
circular dependencies between the compiler and the built-in directives.

Python 3.13+.
"""

from .directive_table import DirectiveTable
from .renderers import (
    CombinedVerbatim,
    Derived,
    RenderBuffer,
    Renderer,
    Verbatim,
    derived,
    is_mergeable,
    verbatim,
)

__all__ = [
    "CombinedVerbatim",
    "Derived",
    "DirectiveTable",
    "RenderBuffer",
    "Renderer",
    "Verbatim",
    "derived",
    "is_mergeable",
    "verbatim",
]
