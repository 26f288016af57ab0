"""Renderer types: the units a compiled pattern is made of.

A renderer appends text derived from a timestamp to an output buffer.
The buffer is a plain ``list[str]`` of chunks; callers join it once at
the end.

Closed variants:
    - Verbatim: fixed text, ignores the timestamp
    - Derived: text computed by a pure function of the timestamp
    - CombinedVerbatim: fixed text produced by merging adjacent Verbatims

Open extension point:
    Any object with ``render(buffer, timestamp) -> buffer`` is a renderer.
    Objects without a ``mergeable`` attribute are never merged.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Protocol, TypeAlias, runtime_checkable

__all__ = [
    "CombinedVerbatim",
    "Derived",
    "RenderBuffer",
    "Renderer",
    "Verbatim",
    "derived",
    "is_mergeable",
    "verbatim",
]

RenderBuffer: TypeAlias = list[str]


@runtime_checkable
class Renderer(Protocol):
    """Protocol for anything that can be placed in a directive table.

    ``render`` appends its output to ``buffer`` and returns the same list.
    It must not mutate the renderer itself: one renderer instance is
    shared by every compiled pattern and every concurrent render.
    """

    def render(self, buffer: RenderBuffer, timestamp: datetime, /) -> RenderBuffer:
        ...  # pragma: no cover  # Protocol stub - not executable


@dataclass(frozen=True, slots=True)
class Verbatim:
    """Fixed text, emitted unchanged for every timestamp.

    Attributes:
        text: The text to append
    """

    mergeable: ClassVar[bool] = True

    text: str

    def render(self, buffer: RenderBuffer, timestamp: datetime, /) -> RenderBuffer:  # noqa: ARG002
        buffer.append(self.text)
        return buffer


@dataclass(frozen=True, slots=True)
class CombinedVerbatim:
    """Fixed text built by merging adjacent verbatim renderers at compile time.

    Renders exactly like :class:`Verbatim`. Only the compiler creates these.

    Attributes:
        text: Concatenated text of the merged renderers
    """

    mergeable: ClassVar[bool] = True

    text: str

    def render(self, buffer: RenderBuffer, timestamp: datetime, /) -> RenderBuffer:  # noqa: ARG002
        buffer.append(self.text)
        return buffer


@dataclass(frozen=True, slots=True)
class Derived:
    """Text computed from the timestamp by a pure function.

    Attributes:
        func: Callable mapping a timestamp to the text to append
        name: Human-readable label used in ``repr`` (defaults to func.__name__)
    """

    mergeable: ClassVar[bool] = False

    func: Callable[[datetime], str]
    name: str = ""

    def render(self, buffer: RenderBuffer, timestamp: datetime, /) -> RenderBuffer:
        buffer.append(self.func(timestamp))
        return buffer

    def __repr__(self) -> str:
        label = self.name or getattr(self.func, "__name__", "<callable>")
        return f"Derived({label})"


def verbatim(text: str) -> Verbatim:
    """Create a renderer that always emits ``text``.

    Example:
        >>> table.set("i", verbatim("ISO"))
    """
    if not isinstance(text, str):
        msg = f"verbatim() expects str, got {type(text).__name__}"
        raise TypeError(msg)
    return Verbatim(text)


def derived(func: Callable[[datetime], str], name: str | None = None) -> Derived:
    """Create a renderer from a function of the timestamp.

    Can be used directly or as a decorator:

        >>> @derived
        ... def quarter(ts):
        ...     return f"Q{(ts.month - 1) // 3 + 1}"
        >>> strftime = Strftime("%Y-%q", directives={"q": quarter})

    Args:
        func: Pure function returning the text for a timestamp
        name: Label for ``repr`` (default: ``func.__name__``)

    Returns:
        Derived renderer wrapping ``func``
    """
    if not callable(func):
        msg = f"derived() expects a callable, got {type(func).__name__}"
        raise TypeError(msg)
    return Derived(func, name or getattr(func, "__name__", ""))


def is_mergeable(renderer: object) -> bool:
    """Check whether a renderer's output is constant and may be merged.

    Only renderers that declare ``mergeable = True`` and expose their
    constant ``text`` qualify. Caller-supplied renderers are opaque and
    therefore never merged.
    """
    return getattr(renderer, "mergeable", False) is True and isinstance(
        getattr(renderer, "text", None), str
    )
