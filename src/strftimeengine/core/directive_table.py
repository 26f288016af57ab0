"""Directive table: maps a directive character to its renderer.

The compiler consults a table once per directive while compiling; compiled
patterns keep no reference to it.

Architecture:
    - DirectiveTable: Mutable until frozen, dict-like introspection
    - The shared default table (runtime.directives) is frozen at creation
    - Customization always goes through copy(), never in-place edits

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator, Mapping

from strftimeengine.diagnostics import (
    DirectiveNotFoundError,
    ErrorTemplate,
    ImmutableTableError,
)

from .renderers import Renderer

__all__ = ["DirectiveTable"]


class DirectiveTable:
    """Mapping from single-character directive keys to renderers.

    Supports dict-like introspection:
        - lookup(key): Get the renderer (raises DirectiveNotFoundError)
        - keys(): List all registered directive characters
        - __iter__: Iterate over directive characters
        - __len__: Count registered directives
        - __contains__: Check if a directive exists (supports 'in' operator)

    Immutability:
        freeze() makes the table read-only. set() and delete() on a frozen
        table raise ImmutableTableError. copy() always returns an unfrozen
        table, so a frozen table can still seed customized ones.

    Thread Safety:
        A frozen table is safe for unsynchronized concurrent reads. An
        unfrozen table belongs to whoever is customizing it and must not
        be mutated concurrently.

    Memory Optimization:
        Uses __slots__ for memory efficiency (avoids per-instance __dict__).

    Example:
        >>> table = DirectiveTable({"Y": year_renderer})
        >>> "Y" in table
        True
        >>> table.set("q", quarter_renderer)
        >>> len(table)
        2
        >>> table.freeze()
        >>> table.set("Q", other)  # Raises ImmutableTableError
    """

    __slots__ = ("_directives", "_frozen")

    def __init__(self, directives: Mapping[str, Renderer] | None = None) -> None:
        """Initialize table, optionally seeded from a mapping.

        Args:
            directives: Initial entries, validated like set()
        """
        self._directives: dict[str, Renderer] = {}
        self._frozen = False
        for key, renderer in (directives or {}).items():
            self.set(key, renderer)

    @property
    def frozen(self) -> bool:
        """True once freeze() has been called."""
        return self._frozen

    def freeze(self) -> None:
        """Make the table read-only. Idempotent."""
        self._frozen = True

    def lookup(self, key: str) -> Renderer:
        """Get the renderer registered for a directive character.

        Args:
            key: Directive character (the one following '%')

        Returns:
            The registered renderer

        Raises:
            DirectiveNotFoundError: If key is not registered
        """
        try:
            return self._directives[key]
        except KeyError:
            raise DirectiveNotFoundError(
                ErrorTemplate.directive_not_found(key), directive=key
            ) from None

    def set(self, key: str, renderer: Renderer) -> None:
        """Insert or overwrite a directive.

        Args:
            key: Single directive character
            renderer: Object exposing render(buffer, timestamp)

        Raises:
            ImmutableTableError: If the table is frozen
            ValueError: If key is not a single-character string
            TypeError: If renderer has no callable render method
        """
        if self._frozen:
            raise ImmutableTableError(ErrorTemplate.table_immutable("set", str(key)))
        if not isinstance(key, str) or len(key) != 1:
            msg = f"Directive key must be a single character, got {key!r}"
            raise ValueError(msg)
        if not callable(getattr(renderer, "render", None)):
            msg = f"Renderer for '%{key}' must define render(buffer, timestamp), got {renderer!r}"
            raise TypeError(msg)
        self._directives[key] = renderer

    def delete(self, key: str) -> None:
        """Remove a directive.

        Args:
            key: Directive character to remove

        Raises:
            ImmutableTableError: If the table is frozen
            DirectiveNotFoundError: If key is not registered
        """
        if self._frozen:
            raise ImmutableTableError(ErrorTemplate.table_immutable("delete", str(key)))
        if key not in self._directives:
            raise DirectiveNotFoundError(ErrorTemplate.directive_not_found(key), directive=key)
        del self._directives[key]

    def keys(self) -> list[str]:
        """List all registered directive characters in registration order."""
        return list(self._directives.keys())

    def copy(self) -> "DirectiveTable":
        """Create an unfrozen shallow copy of this table.

        Returns:
            New DirectiveTable with the same entries. Renderers are shared,
            but adding or removing entries won't affect the original.
        """
        new_table = DirectiveTable()
        new_table._directives = self._directives.copy()
        return new_table

    def __iter__(self) -> Iterator[str]:
        return iter(self._directives)

    def __len__(self) -> int:
        return len(self._directives)

    def __contains__(self, key: object) -> bool:
        return key in self._directives

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(get_default_table())
            'DirectiveTable(directives=40, frozen=True)'
        """
        return f"DirectiveTable(directives={len(self._directives)}, frozen={self._frozen})"
