"""Built-in strftime directives and directive table resolution.

Implements the conventional C library strftime directives over
``datetime.datetime`` in the fixed DEFAULT_LOCALE. Each directive is a
renderer registered under its letter in the default table.

Architecture:
    - Private renderer functions: one pure function per directive
    - create_default_table(): fresh, unfrozen table with every directive
    - get_default_table(): shared, frozen table built once per process
    - resolve_directive_table(): applies caller options on a private copy

Extra renderers (not registered by default):
    MILLISECONDS, MICROSECONDS and UNIX_SECONDS. Register them under any
    letter via ``directives={"L": MILLISECONDS}``.

Example:
    >>> table = resolve_directive_table(directives={"L": MILLISECONDS})
    >>> "L" in table
    True
    >>> "L" in get_default_table()  # Shared table untouched
    False

Python 3.13+. Uses Babel (via calendar_names) for month and weekday names.
"""

import logging
import threading
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta

from strftimeengine.constants import FALLBACK_TZ_NAME, FALLBACK_TZ_OFFSET
from strftimeengine.core.directive_table import DirectiveTable
from strftimeengine.core.renderers import Derived, Renderer, Verbatim

from .calendar_names import get_calendar_names

__all__ = [
    "MICROSECONDS",
    "MILLISECONDS",
    "UNIX_SECONDS",
    "create_default_table",
    "get_default_table",
    "resolve_directive_table",
]

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_SECOND = timedelta(seconds=1)


# ============================================================================
# NAMES
# ============================================================================


def _full_weekday_name(ts: datetime) -> str:
    return get_calendar_names().weekdays_wide[ts.weekday()]


def _abbr_weekday_name(ts: datetime) -> str:
    return get_calendar_names().weekdays_abbreviated[ts.weekday()]


def _full_month_name(ts: datetime) -> str:
    return get_calendar_names().months_wide[ts.month - 1]


def _abbr_month_name(ts: datetime) -> str:
    return get_calendar_names().months_abbreviated[ts.month - 1]


def _am_pm(ts: datetime) -> str:
    names = get_calendar_names()
    return names.am if ts.hour < 12 else names.pm


# ============================================================================
# NUMERIC FIELDS
# ============================================================================


def _hour_12(ts: datetime) -> int:
    return ts.hour % 12 or 12


def _century(ts: datetime) -> str:
    return f"{ts.year // 100:02d}"


def _day_of_month_zero_pad(ts: datetime) -> str:
    return f"{ts.day:02d}"


def _day_of_month_space_pad(ts: datetime) -> str:
    return f"{ts.day:2d}"


def _iso_year(ts: datetime) -> str:
    return f"{ts.isocalendar().year:04d}"


def _iso_year_short(ts: datetime) -> str:
    return f"{ts.isocalendar().year % 100:02d}"


def _hour_24_zero_pad(ts: datetime) -> str:
    return f"{ts.hour:02d}"


def _hour_12_zero_pad(ts: datetime) -> str:
    return f"{_hour_12(ts):02d}"


def _day_of_year(ts: datetime) -> str:
    return f"{ts.timetuple().tm_yday:03d}"


def _hour_24_space_pad(ts: datetime) -> str:
    return f"{ts.hour:2d}"


def _hour_12_space_pad(ts: datetime) -> str:
    return f"{_hour_12(ts):2d}"


def _minute(ts: datetime) -> str:
    return f"{ts.minute:02d}"


def _month(ts: datetime) -> str:
    return f"{ts.month:02d}"


def _second(ts: datetime) -> str:
    return f"{ts.second:02d}"


def _week_of_year_sunday(ts: datetime) -> str:
    # Days before the year's first Sunday fall in week 00.
    yday = ts.timetuple().tm_yday - 1
    wday = ts.isoweekday() % 7
    return f"{(yday + 7 - wday) // 7:02d}"


def _week_of_year_monday(ts: datetime) -> str:
    # Days before the year's first Monday fall in week 00.
    yday = ts.timetuple().tm_yday - 1
    return f"{(yday + 7 - ts.weekday()) // 7:02d}"


def _weekday_monday_one(ts: datetime) -> str:
    return str(ts.isoweekday())


def _weekday_sunday_zero(ts: datetime) -> str:
    return str(ts.isoweekday() % 7)


def _iso_week_number(ts: datetime) -> str:
    return f"{ts.isocalendar().week:02d}"


def _year(ts: datetime) -> str:
    return f"{ts.year:04d}"


def _year_short(ts: datetime) -> str:
    return f"{ts.year % 100:02d}"


# ============================================================================
# TIME ZONE
# ============================================================================


def _timezone_name(ts: datetime) -> str:
    name = ts.tzname()
    return FALLBACK_TZ_NAME if name is None else name


def _timezone_offset(ts: datetime) -> str:
    offset = ts.utcoffset()
    if offset is None:
        return FALLBACK_TZ_OFFSET
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(offset) // timedelta(minutes=1)
    hours, minutes = divmod(minutes, 60)
    return f"{sign}{hours:02d}{minutes:02d}"


# ============================================================================
# COMPOSITES
# ============================================================================


def _date_and_time(ts: datetime) -> str:
    # C locale: "%a %b %e %H:%M:%S %Y"
    return (
        f"{_abbr_weekday_name(ts)} {_abbr_month_name(ts)} {_day_of_month_space_pad(ts)} "
        f"{_hms(ts)} {_year(ts)}"
    )


def _mdy(ts: datetime) -> str:
    return f"{_month(ts)}/{_day_of_month_zero_pad(ts)}/{_year_short(ts)}"


def _ymd(ts: datetime) -> str:
    return f"{_year(ts)}-{_month(ts)}-{_day_of_month_zero_pad(ts)}"


def _hm(ts: datetime) -> str:
    return f"{_hour_24_zero_pad(ts)}:{_minute(ts)}"


def _hms(ts: datetime) -> str:
    return f"{_hour_24_zero_pad(ts)}:{_minute(ts)}:{_second(ts)}"


def _hms_12_am_pm(ts: datetime) -> str:
    return f"{_hour_12_zero_pad(ts)}:{_minute(ts)}:{_second(ts)} {_am_pm(ts)}"


def _e_b_y(ts: datetime) -> str:
    return f"{_day_of_month_space_pad(ts)}-{_abbr_month_name(ts)}-{_year(ts)}"


# %x and %X in the C locale are the same as %D and %T.
_national_date = _mdy
_national_time = _hms


# ============================================================================
# EXTRA RENDERERS
# ============================================================================


def _milliseconds(ts: datetime) -> str:
    return f"{ts.microsecond // 1000:03d}"


def _microseconds(ts: datetime) -> str:
    return f"{ts.microsecond:06d}"


def _unix_seconds(ts: datetime) -> str:
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return str((ts - _EPOCH) // _ONE_SECOND)


MILLISECONDS = Derived(_milliseconds, "milliseconds")
"""Milliseconds within the second, 3 digits (000-999)."""

MICROSECONDS = Derived(_microseconds, "microseconds")
"""Microseconds within the second, 6 digits (000000-999999)."""

UNIX_SECONDS = Derived(_unix_seconds, "unix_seconds")
"""Whole seconds since 1970-01-01T00:00:00Z. Naive timestamps are taken as UTC."""


# ============================================================================
# TABLES
# ============================================================================

_BUILTIN_DIRECTIVES: dict[str, Renderer] = {
    "A": Derived(_full_weekday_name, "full_weekday_name"),
    "a": Derived(_abbr_weekday_name, "abbr_weekday_name"),
    "B": Derived(_full_month_name, "full_month_name"),
    "b": Derived(_abbr_month_name, "abbr_month_name"),
    "C": Derived(_century, "century"),
    "c": Derived(_date_and_time, "date_and_time"),
    "D": Derived(_mdy, "mdy"),
    "d": Derived(_day_of_month_zero_pad, "day_of_month_zero_pad"),
    "e": Derived(_day_of_month_space_pad, "day_of_month_space_pad"),
    "F": Derived(_ymd, "ymd"),
    "G": Derived(_iso_year, "iso_year"),
    "g": Derived(_iso_year_short, "iso_year_short"),
    "H": Derived(_hour_24_zero_pad, "hour_24_zero_pad"),
    "h": Derived(_abbr_month_name, "abbr_month_name"),
    "I": Derived(_hour_12_zero_pad, "hour_12_zero_pad"),
    "j": Derived(_day_of_year, "day_of_year"),
    "k": Derived(_hour_24_space_pad, "hour_24_space_pad"),
    "l": Derived(_hour_12_space_pad, "hour_12_space_pad"),
    "M": Derived(_minute, "minute"),
    "m": Derived(_month, "month"),
    "n": Verbatim("\n"),
    "p": Derived(_am_pm, "am_pm"),
    "R": Derived(_hm, "hm"),
    "r": Derived(_hms_12_am_pm, "hms_12_am_pm"),
    "S": Derived(_second, "second"),
    "T": Derived(_hms, "hms"),
    "t": Verbatim("\t"),
    "U": Derived(_week_of_year_sunday, "week_of_year_sunday"),
    "u": Derived(_weekday_monday_one, "weekday_monday_one"),
    "V": Derived(_iso_week_number, "iso_week_number"),
    "v": Derived(_e_b_y, "e_b_y"),
    "W": Derived(_week_of_year_monday, "week_of_year_monday"),
    "w": Derived(_weekday_sunday_zero, "weekday_sunday_zero"),
    "X": Derived(_national_time, "national_time"),
    "x": Derived(_national_date, "national_date"),
    "Y": Derived(_year, "year"),
    "y": Derived(_year_short, "year_short"),
    "Z": Derived(_timezone_name, "timezone_name"),
    "z": Derived(_timezone_offset, "timezone_offset"),
    "%": Verbatim("%"),
}


def create_default_table() -> DirectiveTable:
    """Create a new, unfrozen DirectiveTable with every built-in directive.

    Each call returns a new instance, so callers may modify the result
    without affecting anyone else.

    Returns:
        DirectiveTable with all built-in directives registered.

    Example:
        >>> table = create_default_table()
        >>> "Y" in table
        True
        >>> table.set("q", derived(lambda ts: f"Q{(ts.month - 1) // 3 + 1}"))
    """
    return DirectiveTable(_BUILTIN_DIRECTIVES)


# Module-level shared default table.
# Built on first access under _DEFAULT_TABLE_LOCK to avoid import-time work.
_DEFAULT_TABLE: DirectiveTable | None = None
_DEFAULT_TABLE_LOCK = threading.Lock()


def get_default_table() -> DirectiveTable:
    """Get the shared, frozen DirectiveTable with the built-in directives.

    Built exactly once per process, then only read. Calling set() or
    delete() on it raises ImmutableTableError; use copy() or
    create_default_table() for a table you can modify.

    Thread Safety:
        Safe for unsynchronized concurrent reads. Initialization is
        guarded by a lock.

    Returns:
        Frozen shared DirectiveTable.
    """
    # pylint: disable=global-statement
    global _DEFAULT_TABLE  # noqa: PLW0603
    if _DEFAULT_TABLE is None:
        with _DEFAULT_TABLE_LOCK:
            if _DEFAULT_TABLE is None:
                table = create_default_table()
                table.freeze()
                logger.debug("Built default directive table with %d directives", len(table))
                _DEFAULT_TABLE = table
    return _DEFAULT_TABLE


def resolve_directive_table(
    directive_table: DirectiveTable | None = None,
    directives: Mapping[str, Renderer] | None = None,
) -> DirectiveTable:
    """Resolve the table a pattern is compiled against.

    Args:
        directive_table: Replaces the base table entirely
            (default: get_default_table())
        directives: Extra directives {char: renderer} added on top of the
            base table, overriding entries with the same key

    Returns:
        The base table itself when no extra directives are given,
        otherwise a private copy of the base with the extras applied.
        Neither the shared default table nor a caller-supplied table is
        ever modified.

    Raises:
        ValueError: If an extra directive key is not a single character
        TypeError: If an extra renderer has no render method
    """
    base = get_default_table() if directive_table is None else directive_table
    if not directives:
        return base

    table = base.copy()
    for key, renderer in directives.items():
        table.set(key, renderer)
    logger.debug("Applied %d extra directive(s): %s", len(directives), "".join(directives))
    return table
