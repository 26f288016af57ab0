"""strftimeengine - compiled strftime patterns for Python.

Compiles a strftime-style pattern once into a sequence of renderers and
renders it for any number of timestamps without re-parsing. Directives
follow C library strftime semantics in a single fixed locale (en_US);
extra or overriding directives can be registered per pattern.

Public API:
    Strftime - Compiled, reusable, thread-safe pattern
    new - Compile a pattern (same as Strftime(...))
    format - Compile and render in one pass
    DirectiveTable - Mapping from directive character to renderer
    get_default_table - Shared frozen table of built-in directives
    create_default_table - Fresh mutable table of built-in directives
    verbatim, derived - Renderer factories for custom directives
    MILLISECONDS, MICROSECONDS, UNIX_SECONDS - Optional extra renderers

Exceptions:
    StrftimeError - Base exception class
    PatternCompileError - Base for pattern compilation errors
    StrayEscapeError - Pattern ends with a lone '%'
    UnknownDirectiveError - '%<char>' with no registered directive
    DirectiveNotFoundError - Directive table lookup failure
    ImmutableTableError - Mutation of a frozen directive table

Submodules:
    strftimeengine.core - Renderer types and DirectiveTable
    strftimeengine.syntax - Pattern compiler and compile handlers
    strftimeengine.runtime - Built-in directives and compiled patterns
    strftimeengine.diagnostics - Error types and structured diagnostics
"""

# Essential Public API - Minimal exports for clean namespace
from .core import DirectiveTable, Renderer, derived, verbatim
from .diagnostics import (
    DirectiveNotFoundError,
    ImmutableTableError,
    PatternCompileError,
    StrayEscapeError,
    StrftimeError,
    UnknownDirectiveError,
)
from .runtime import (
    MICROSECONDS,
    MILLISECONDS,
    UNIX_SECONDS,
    Strftime,
    create_default_table,
    format,  # noqa: A004
    get_default_table,
    new,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("strftimeengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "MICROSECONDS",
    "MILLISECONDS",
    "UNIX_SECONDS",
    "DirectiveNotFoundError",
    "DirectiveTable",
    "ImmutableTableError",
    "PatternCompileError",
    "Renderer",
    "StrayEscapeError",
    "Strftime",
    "StrftimeError",
    "UnknownDirectiveError",
    "__version__",
    "create_default_table",
    "derived",
    "format",
    "get_default_table",
    "new",
    "verbatim",
]
