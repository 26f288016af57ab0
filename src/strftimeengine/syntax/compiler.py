"""Pattern compiler: splits a pattern into renderers.

One scan routine serves two purposes, selected by the handler it drives:
    - RendererListBuilder: collect renderers into a reusable sequence,
      merging adjacent verbatim text as it goes
    - RendererExecutor: render each renderer immediately for a single
      timestamp, without building a sequence

Algorithm:
    Scan left to right for '%'. Text before it becomes one Verbatim.
    The character after '%' is looked up in the directive table and its
    renderer is emitted; scanning resumes two characters past the '%'.
    A '%' at the very end, or an unknown directive character, aborts
    compilation with no partial result.

Python 3.13+. Zero external dependencies.
"""

from datetime import datetime
from typing import Protocol

from strftimeengine.constants import ESCAPE_CHAR
from strftimeengine.core.directive_table import DirectiveTable
from strftimeengine.core.renderers import (
    CombinedVerbatim,
    RenderBuffer,
    Renderer,
    Verbatim,
    is_mergeable,
)
from strftimeengine.diagnostics import (
    DirectiveNotFoundError,
    ErrorTemplate,
    StrayEscapeError,
    UnknownDirectiveError,
)

from .position import span_at

__all__ = [
    "CompileHandler",
    "RendererExecutor",
    "RendererListBuilder",
    "compile_pattern",
]


class CompileHandler(Protocol):
    """Receives renderers from compile_pattern() in pattern order."""

    def handle(self, renderer: Renderer, /) -> None:
        ...  # pragma: no cover  # Protocol stub - not executable


class RendererListBuilder:
    """Collects renderers into a list, merging adjacent verbatim text.

    When both the previously collected renderer and the incoming one are
    mergeable, the previous entry is replaced by a CombinedVerbatim holding
    both texts, so the list never contains two adjacent mergeable entries.
    The merge is invisible in rendered output.

    Args:
        merge: Set False to keep every emitted renderer as its own entry
    """

    __slots__ = ("_merge", "_prev_mergeable", "renderers")

    def __init__(self, *, merge: bool = True) -> None:
        self.renderers: list[Renderer] = []
        self._merge = merge
        self._prev_mergeable = False

    def handle(self, renderer: Renderer, /) -> None:
        mergeable = self._merge and is_mergeable(renderer)
        if mergeable and self._prev_mergeable:
            prev = self.renderers[-1]
            self.renderers[-1] = CombinedVerbatim(prev.text + renderer.text)  # type: ignore[attr-defined]
            return
        self.renderers.append(renderer)
        self._prev_mergeable = mergeable


class RendererExecutor:
    """Renders each renderer immediately into its own buffer.

    Used by the one-shot format() path: no renderer sequence is kept.

    Args:
        timestamp: The timestamp every renderer is applied to
    """

    __slots__ = ("buffer", "timestamp")

    def __init__(self, timestamp: datetime) -> None:
        self.timestamp = timestamp
        self.buffer: RenderBuffer = []

    def handle(self, renderer: Renderer, /) -> None:
        self.buffer = renderer.render(self.buffer, self.timestamp)

    def getvalue(self) -> str:
        """Return everything rendered so far as one string."""
        return "".join(self.buffer)


def compile_pattern(handler: CompileHandler, pattern: str, table: DirectiveTable) -> None:
    """Tokenize ``pattern`` against ``table``, feeding renderers to ``handler``.

    Args:
        handler: Receives each renderer in pattern order
        pattern: strftime-style pattern
        table: Directive table to resolve '%<char>' against

    Raises:
        StrayEscapeError: If the pattern ends with a lone '%'
        UnknownDirectiveError: If a '%<char>' pair names no registered
            directive; the DirectiveNotFoundError is chained as __cause__
    """
    pos = 0
    length = len(pattern)
    while pos < length:
        idx = pattern.find(ESCAPE_CHAR, pos)
        if idx < 0:
            handler.handle(Verbatim(pattern[pos:]))
            break

        if idx == length - 1:
            span = span_at(pattern, idx, 1)
            raise StrayEscapeError(
                ErrorTemplate.stray_escape(pattern, span), pattern=pattern, position=idx
            )

        if idx > pos:
            handler.handle(Verbatim(pattern[pos:idx]))

        key = pattern[idx + 1]
        try:
            renderer = table.lookup(key)
        except DirectiveNotFoundError as e:
            span = span_at(pattern, idx, 2)
            raise UnknownDirectiveError(
                ErrorTemplate.unknown_directive(key, pattern, span),
                directive=key,
                pattern=pattern,
                position=idx,
            ) from e

        handler.handle(renderer)
        pos = idx + 2
