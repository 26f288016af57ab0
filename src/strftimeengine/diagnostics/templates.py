"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # =========================================================================
    # LOOKUP ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def directive_not_found(directive: str) -> Diagnostic:
        """Directive table has no entry for a character.

        Args:
            directive: The character that was looked up

        Returns:
            Diagnostic for DIRECTIVE_NOT_FOUND
        """
        msg = f"Lookup failed: '%{directive}' was not found in directive table"
        return Diagnostic(
            code=DiagnosticCode.DIRECTIVE_NOT_FOUND,
            message=msg,
            span=None,
            hint="Check spelling or register the directive with DirectiveTable.set()",
            directive=directive,
        )

    # =========================================================================
    # TABLE ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def table_immutable(operation: str, directive: str) -> Diagnostic:
        """Mutation attempted on a frozen directive table.

        Args:
            operation: The rejected operation ("set" or "delete")
            directive: The key the operation targeted

        Returns:
            Diagnostic for TABLE_IMMUTABLE
        """
        msg = f"Cannot {operation} '%{directive}': directive table is frozen"
        return Diagnostic(
            code=DiagnosticCode.TABLE_IMMUTABLE,
            message=msg,
            span=None,
            hint="Call copy() to obtain a mutable table seeded with the same directives",
            directive=directive,
        )

    # =========================================================================
    # SYNTAX ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def stray_escape(pattern: str, span: SourceSpan) -> Diagnostic:
        """Pattern ends with a lone '%'.

        Args:
            pattern: The pattern being compiled
            span: Location of the trailing '%'

        Returns:
            Diagnostic for STRAY_ESCAPE
        """
        msg = f"Stray % at the end of pattern at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.STRAY_ESCAPE,
            message=msg,
            span=span,
            hint="Write '%%' for a literal percent sign",
            pattern=pattern,
        )

    @staticmethod
    def unknown_directive(directive: str, pattern: str, span: SourceSpan) -> Diagnostic:
        """Character after '%' is not a registered directive.

        Args:
            directive: The character that followed '%'
            pattern: The pattern being compiled
            span: Location of the '%<char>' pair

        Returns:
            Diagnostic for UNKNOWN_DIRECTIVE
        """
        msg = f"Unknown directive '%{directive}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_DIRECTIVE,
            message=msg,
            span=span,
            hint="Register the directive or escape the percent sign as '%%'",
            directive=directive,
            pattern=pattern,
        )
