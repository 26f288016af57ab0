"""Compiled strftime patterns and the one-shot format() API.

Strftime compiles a pattern once and renders it any number of times.
format() compiles and renders in a single pass for patterns that are
used only once, without building the renderer sequence.

Example:
    >>> from datetime import UTC, datetime
    >>> ts = datetime(2009, 11, 10, 23, 0, tzinfo=UTC)
    >>> stamp = Strftime("%Y-%m-%d %H:%M:%S")
    >>> stamp.format_string(ts)
    '2009-11-10 23:00:00'
    >>> format("%A, %B %e", ts)
    'Tuesday, November 10'

Thread Safety:
    A Strftime is immutable once constructed. Any number of threads may
    render it concurrently; each render builds its own buffer.

Python 3.13+.
"""

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import BinaryIO

from strftimeengine.core.directive_table import DirectiveTable
from strftimeengine.core.renderers import RenderBuffer, Renderer
from strftimeengine.syntax.compiler import (
    RendererExecutor,
    RendererListBuilder,
    compile_pattern,
)

from .directives import resolve_directive_table

__all__ = ["Strftime", "format", "new"]

logger = logging.getLogger(__name__)


def _require_datetime(timestamp: object) -> None:
    """Reject anything that is not a datetime.datetime.

    datetime.date lacks the time-of-day and zone fields several
    directives read, so it is rejected up front rather than failing
    halfway through a render.

    Raises:
        TypeError: If timestamp is not a datetime.datetime
    """
    if not isinstance(timestamp, datetime):
        msg = f"Expected datetime.datetime, got {type(timestamp).__name__}"
        raise TypeError(msg)


class Strftime:
    """A compiled strftime pattern.

    Args:
        pattern: strftime-style pattern, e.g. ``"%Y-%m-%d"``
        directive_table: Replaces the default directive table entirely
        directives: Extra directives {char: renderer} layered on top of the
            base table (built-ins may be overridden)

    Raises:
        StrayEscapeError: If the pattern ends with a lone '%'
        UnknownDirectiveError: If the pattern uses an unregistered directive

    Compilation happens in the constructor; a Strftime instance always
    holds a valid program. The directive table is only consulted during
    construction.
    """

    __slots__ = ("_pattern", "_renderers")

    def __init__(
        self,
        pattern: str,
        *,
        directive_table: DirectiveTable | None = None,
        directives: Mapping[str, Renderer] | None = None,
    ) -> None:
        table = resolve_directive_table(directive_table, directives)
        builder = RendererListBuilder()
        compile_pattern(builder, pattern, table)

        self._pattern = pattern
        self._renderers: tuple[Renderer, ...] = tuple(builder.renderers)
        logger.debug("Compiled pattern %r into %d step(s)", pattern, len(self._renderers))

    @property
    def pattern(self) -> str:
        """The original pattern text, for diagnostics only."""
        return self._pattern

    @property
    def renderers(self) -> tuple[Renderer, ...]:
        """The compiled renderer sequence, in pattern order."""
        return self._renderers

    def render_into(self, buffer: RenderBuffer, timestamp: datetime) -> RenderBuffer:
        """Append the rendered pattern to ``buffer``.

        Args:
            buffer: List of output chunks to extend
            timestamp: Timestamp to render

        Returns:
            The same buffer, extended
        """
        _require_datetime(timestamp)
        for renderer in self._renderers:
            buffer = renderer.render(buffer, timestamp)
        return buffer

    def format_string(self, timestamp: datetime) -> str:
        """Render the pattern for ``timestamp`` and return it as a string."""
        return "".join(self.render_into([], timestamp))

    def format_to(self, stream: BinaryIO, timestamp: datetime, *, encoding: str = "utf-8") -> None:
        """Render the pattern and write the encoded bytes to ``stream``.

        Args:
            stream: Binary sink exposing write(bytes)
            timestamp: Timestamp to render
            encoding: Text encoding for the output bytes

        Raises:
            Whatever ``stream.write`` raises (e.g. OSError), unchanged.
            A failed write does not affect later renders.
        """
        stream.write(self.format_string(timestamp).encode(encoding))

    __call__ = format_string

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._pattern!r})"


def new(
    pattern: str,
    *,
    directive_table: DirectiveTable | None = None,
    directives: Mapping[str, Renderer] | None = None,
) -> Strftime:
    """Compile ``pattern`` into a reusable Strftime.

    Equivalent to ``Strftime(pattern, ...)``.

    Raises:
        StrayEscapeError: If the pattern ends with a lone '%'
        UnknownDirectiveError: If the pattern uses an unregistered directive
    """
    return Strftime(pattern, directive_table=directive_table, directives=directives)


def format(  # noqa: A001 - mirrors datetime.strftime vocabulary
    pattern: str,
    timestamp: datetime,
    *,
    directive_table: DirectiveTable | None = None,
    directives: Mapping[str, Renderer] | None = None,
) -> str:
    """Format ``timestamp`` with ``pattern`` in one pass.

    The pattern is re-compiled on every call. When the same pattern is
    used repeatedly, build a Strftime once and reuse it.

    Args:
        pattern: strftime-style pattern
        timestamp: Timestamp to render
        directive_table: Replaces the default directive table entirely
        directives: Extra directives {char: renderer} layered on the base

    Returns:
        The rendered text

    Raises:
        StrayEscapeError: If the pattern ends with a lone '%'
        UnknownDirectiveError: If the pattern uses an unregistered directive
        TypeError: If timestamp is not a datetime.datetime
    """
    _require_datetime(timestamp)
    table = resolve_directive_table(directive_table, directives)
    executor = RendererExecutor(timestamp)
    compile_pattern(executor, pattern, table)
    return executor.getvalue()
