"""Pattern syntax package.

Provides the pattern compiler, its handlers, and position helpers for
error reporting. Separate from runtime so the scan routine can be reused
with custom handlers (linters, pattern introspection).

Python 3.13+.
"""

from .compiler import CompileHandler, RendererExecutor, RendererListBuilder, compile_pattern
from .position import column_offset, line_offset, span_at

__all__ = [
    "CompileHandler",
    "RendererExecutor",
    "RendererListBuilder",
    "column_offset",
    "compile_pattern",
    "line_offset",
    "span_at",
]
