"""strftimeengine exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object; the
Diagnostic is kept on the instance for tooling.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class StrftimeError(Exception):
    """Base exception for all strftimeengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize StrftimeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PatternCompileError(StrftimeError):
    """Pattern could not be compiled.

    Compilation aborts on the first error; no compiled pattern and no
    output is produced.

    Attributes:
        pattern: The pattern being compiled
        position: Offset of the offending '%' in the pattern
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str = "", position: int = -1) -> None:
        """Initialize PatternCompileError.

        Args:
            message: Error message string OR Diagnostic object
            pattern: The pattern being compiled
            position: Offset of the offending '%' in the pattern
        """
        super().__init__(message)
        self.pattern = pattern
        self.position = position


class StrayEscapeError(PatternCompileError):
    """Pattern ends with a '%' that introduces no directive.

    Example:
        "100%"  ← nothing follows the '%'
    """


class UnknownDirectiveError(PatternCompileError):
    """Character after '%' has no entry in the active directive table.

    The underlying DirectiveNotFoundError is available as ``__cause__``.

    Attributes:
        directive: The offending character
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        directive: str,
        pattern: str = "",
        position: int = -1,
    ) -> None:
        """Initialize UnknownDirectiveError.

        Args:
            message: Error message string OR Diagnostic object
            directive: The character that followed '%'
            pattern: The pattern being compiled
            position: Offset of the '%' in the pattern
        """
        super().__init__(message, pattern=pattern, position=position)
        self.directive = directive


class DirectiveNotFoundError(StrftimeError, LookupError):
    """Directive table has no entry for the requested character.

    Attributes:
        directive: The character that was looked up
    """

    def __init__(self, message: str | Diagnostic, *, directive: str) -> None:
        """Initialize DirectiveNotFoundError.

        Args:
            message: Error message string OR Diagnostic object
            directive: The character that was looked up
        """
        super().__init__(message)
        self.directive = directive


class ImmutableTableError(StrftimeError, TypeError):
    """Attempt to mutate a frozen directive table.

    The shared default table is always frozen. Use ``copy()`` to obtain
    a mutable table seeded with the same directives.
    """
