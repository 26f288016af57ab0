"""Calendar names for the fixed formatting locale.

Month names, weekday names and AM/PM markers come from Babel's CLDR data
for DEFAULT_LOCALE. They are loaded once on first use and shared by every
renderer afterwards.

Architecture:
    - CalendarNames: Immutable name container (frozen dataclass)
    - get_calendar_names(): Cached loader, one Babel query per process
    - No dependency on Python's locale module (avoids global state)

Thread Safety:
    CalendarNames is immutable. functools.cache makes concurrent first
    calls safe; at worst two threads build equal instances.

Python 3.13+. Uses Babel for CLDR data.
"""

import logging
from dataclasses import dataclass
from functools import cache

from babel import Locale
from babel import dates as babel_dates

from strftimeengine.constants import DEFAULT_LOCALE

__all__ = ["CalendarNames", "get_calendar_names"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalendarNames:
    """Immutable month/weekday/period names for one locale.

    Weekday tuples are indexed like ``datetime.weekday()`` (Monday = 0).
    Month tuples are indexed like ``datetime.month - 1``.

    Attributes:
        locale_code: Locale the names were loaded for
        weekdays_wide: Full weekday names ("Monday" ...)
        weekdays_abbreviated: Abbreviated weekday names ("Mon" ...)
        months_wide: Full month names ("January" ...)
        months_abbreviated: Abbreviated month names ("Jan" ...)
        am: Ante meridiem marker
        pm: Post meridiem marker
    """

    locale_code: str
    weekdays_wide: tuple[str, ...]
    weekdays_abbreviated: tuple[str, ...]
    months_wide: tuple[str, ...]
    months_abbreviated: tuple[str, ...]
    am: str
    pm: str

    def __post_init__(self) -> None:
        """Validate table sizes.

        Raises:
            ValueError: If a weekday table does not have 7 entries or a
                month table does not have 12.
        """
        for label, names, expected in (
            ("weekdays_wide", self.weekdays_wide, 7),
            ("weekdays_abbreviated", self.weekdays_abbreviated, 7),
            ("months_wide", self.months_wide, 12),
            ("months_abbreviated", self.months_abbreviated, 12),
        ):
            if len(names) != expected:
                msg = f"CalendarNames.{label} must have {expected} entries, got {len(names)}"
                raise ValueError(msg)


@cache
def get_calendar_names() -> CalendarNames:
    """Load calendar names for DEFAULT_LOCALE from Babel.

    Uses the "format" context, which is what strftime output represents
    (names embedded in a date string rather than standing alone).

    AM/PM markers are upper-cased to match the C library's "AM"/"PM".

    Returns:
        Cached CalendarNames instance

    Raises:
        babel.UnknownLocaleError: If DEFAULT_LOCALE is not in Babel's data
    """
    locale = Locale.parse(DEFAULT_LOCALE)

    weekdays_wide = babel_dates.get_day_names("wide", "format", locale)
    weekdays_abbr = babel_dates.get_day_names("abbreviated", "format", locale)
    months_wide = babel_dates.get_month_names("wide", "format", locale)
    months_abbr = babel_dates.get_month_names("abbreviated", "format", locale)
    periods = babel_dates.get_period_names("abbreviated", "format", locale)

    names = CalendarNames(
        locale_code=DEFAULT_LOCALE,
        weekdays_wide=tuple(weekdays_wide[i] for i in range(7)),
        weekdays_abbreviated=tuple(weekdays_abbr[i] for i in range(7)),
        months_wide=tuple(months_wide[i] for i in range(1, 13)),
        months_abbreviated=tuple(months_abbr[i] for i in range(1, 13)),
        am=periods["am"].upper(),
        pm=periods["pm"].upper(),
    )
    logger.debug("Loaded calendar names for %s from CLDR", DEFAULT_LOCALE)
    return names
