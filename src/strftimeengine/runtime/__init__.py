"""strftimeengine runtime package.

Provides the built-in directives, the shared default table, compiled
patterns and the one-shot format() API. Depends on the syntax package
for compilation.

Python 3.13+.
"""

from .calendar_names import CalendarNames, get_calendar_names
from .directives import (
    MICROSECONDS,
    MILLISECONDS,
    UNIX_SECONDS,
    create_default_table,
    get_default_table,
    resolve_directive_table,
)
from .strftime import Strftime, format, new  # noqa: A004

__all__ = [
    "MICROSECONDS",
    "MILLISECONDS",
    "UNIX_SECONDS",
    "CalendarNames",
    "Strftime",
    "create_default_table",
    "format",
    "get_calendar_names",
    "get_default_table",
    "new",
    "resolve_directive_table",
]
