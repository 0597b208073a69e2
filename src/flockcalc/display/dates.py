"""
Date Arithmetic — batch age, production week and date labels

Rows carry dates in two shapes: calendar-only strings ("2025-01-15") for
day-level fields such as a batch start date, and full timestamps
("2025-01-15T14:03:22.123+00:00") for created_at columns. Everything is
normalized to a naive datetime in the host's local time.

CRITICAL INVARIANTS:
1. A calendar-only string is built from its year/month/day components as
   local midnight. It is never parsed as UTC midnight, which would move the
   date one day back for every user west of UTC.
2. Timezone-aware values are converted to local time before their calendar
   date is read.
3. Unparseable input yields None (the "no date" sentinel); no function in
   this module raises on it.

Every function that needs "now" accepts it explicitly (now=None means the
current local time), so results are reproducible in tests.
"""

import math
import re
from datetime import date, datetime
from typing import Final, TypeAlias

from babel.dates import format_date as babel_format_date
from dateutil import parser as dateutil_parser

from flockcalc.core.math.numerical_safeguards import clamp, to_finite
from flockcalc.display.locale import DEFAULT_DISPLAY_LOCALE, NO_DATE_LABEL, DisplayLocale

DateInput: TypeAlias = str | date | datetime | None

# =============================================================================
# CONSTANTS
# =============================================================================

SECONDS_PER_DAY: Final[int] = 24 * 60 * 60

DAYS_PER_WEEK: Final[int] = 7

# Feed-plan tables define six weekly tiers; later weeks collapse to the last
FIRST_PRODUCTION_WEEK: Final[int] = 1
MAX_PRODUCTION_WEEK: Final[int] = 6

# Approximations used by relative labels
DAYS_PER_MONTH: Final[int] = 30
DAYS_PER_YEAR: Final[int] = 365

_CALENDAR_DATE_RE: Final[re.Pattern[str]] = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

# Defaults for free-form strings; a string parses only if both agree
_PARTIAL_DATE_DEFAULTS: Final[tuple[datetime, datetime]] = (
    datetime(2000, 1, 1),
    datetime(2001, 2, 2),
)

# Babel patterns
_PATTERN_SHORT: Final[str] = "d MMM"
_PATTERN_DEFAULT: Final[str] = "d MMM y"
_FORMAT_LONG: Final[str] = "long"


# =============================================================================
# PARSING
# =============================================================================


def _to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_date_input(value: object) -> datetime | None:
    """
    Normalize a date-like value to a naive local datetime.

    Args:
        value: "YYYY-MM-DD" string, other date/datetime string, datetime,
            date, or anything else

    Returns:
        Naive local datetime, or None if the value cannot be read as a date

    Examples:
        >>> parse_date_input("2025-01-15")
        datetime.datetime(2025, 1, 15, 0, 0)
        >>> parse_date_input("invalid") is None
        True
    """
    if value is None:
        return None

    # datetime is a subclass of date: check it first
    if isinstance(value, datetime):
        return _to_local_naive(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    match = _CALENDAR_DATE_RE.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        try:
            return datetime(year, month, day)
        except ValueError:
            # 2025-02-30 and friends
            return None

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        parsed = _parse_complete_date(text)
        if parsed is None:
            return None

    return _to_local_naive(parsed)


def _parse_complete_date(text: str) -> datetime | None:
    # dateutil fills missing fields from its default; parsing against two
    # defaults that differ in year, month and day exposes any filled field
    try:
        first, second = (
            dateutil_parser.parse(text, default=default) for default in _PARTIAL_DATE_DEFAULTS
        )
    except (ValueError, OverflowError):
        return None

    if first != second:
        return None
    return first


def resolve_now(now: DateInput) -> datetime:
    """The reference moment: now if given and readable, else the current local time."""
    if now is None:
        return datetime.now()
    return parse_date_input(now) or datetime.now()


# =============================================================================
# FORMATTING
# =============================================================================


def format_date_short(
    value: object,
    display: DisplayLocale = DEFAULT_DISPLAY_LOCALE,
) -> str:
    """Day and abbreviated month, e.g. "15 ene". "N/A" without a date."""
    parsed = parse_date_input(value)
    if parsed is None:
        return NO_DATE_LABEL
    return babel_format_date(parsed.date(), format=_PATTERN_SHORT, locale=display.date_locale)


def format_date(
    value: object,
    display: DisplayLocale = DEFAULT_DISPLAY_LOCALE,
) -> str:
    """Day, abbreviated month and year, e.g. "15 ene 2025". "N/A" without a date."""
    parsed = parse_date_input(value)
    if parsed is None:
        return NO_DATE_LABEL
    return babel_format_date(parsed.date(), format=_PATTERN_DEFAULT, locale=display.date_locale)


def format_date_long(
    value: object,
    display: DisplayLocale = DEFAULT_DISPLAY_LOCALE,
) -> str:
    """Day, full month name and year, e.g. "15 de enero de 2025". "N/A" without a date."""
    parsed = parse_date_input(value)
    if parsed is None:
        return NO_DATE_LABEL
    return babel_format_date(parsed.date(), format=_FORMAT_LONG, locale=display.date_locale)


def to_iso_date_string(value: object) -> str:
    """
    Render the local calendar date as YYYY-MM-DD.

    A calendar-only string round-trips unchanged whatever the host timezone.

    Examples:
        >>> to_iso_date_string("2025-01-15")
        '2025-01-15'
    """
    parsed = parse_date_input(value)
    if parsed is None:
        return NO_DATE_LABEL
    return parsed.date().isoformat()


# =============================================================================
# ARITHMETIC
# =============================================================================


def days_between(start: DateInput, end: DateInput = None) -> int:
    """
    Whole days from start to end, rounded up.

    Args:
        start: First bound
        end: Second bound (default: now)

    Returns:
        ceil((end - start) / 1 day); 0 if either bound cannot be parsed.
        Negative when end precedes start.

    Examples:
        >>> days_between("2025-01-01", "2025-01-11")
        10
        >>> days_between("invalid", "2025-01-11")
        0
    """
    start_dt = parse_date_input(start)
    end_dt = datetime.now() if end is None else parse_date_input(end)

    if start_dt is None or end_dt is None:
        return 0

    return math.ceil((end_dt - start_dt).total_seconds() / SECONDS_PER_DAY)


def days_to_weeks(days: object) -> int:
    """
    Convert a day count to weeks, rounded up (day 8 is in week 2).

    Examples:
        >>> days_to_weeks(7)
        1
        >>> days_to_weeks(8)
        2
    """
    return math.ceil(to_finite(days) / DAYS_PER_WEEK)


def get_current_week(start_date: DateInput, now: DateInput = None) -> int:
    """
    Production week of a batch, between 1 and 6.

    Weeks past the sixth are reported as week 6 (the feed plan has six
    tiers). A start date in the future, or today, is week 1.

    Args:
        start_date: Batch start date
        now: Reference moment (default: now)

    Returns:
        Week number in [1, 6]; 1 for an unparseable start date
    """
    start = parse_date_input(start_date)
    if start is None:
        return FIRST_PRODUCTION_WEEK

    weeks = days_to_weeks(days_between(start, resolve_now(now)))
    return int(clamp(weeks, FIRST_PRODUCTION_WEEK, MAX_PRODUCTION_WEEK))


def is_today(value: object, now: DateInput = None) -> bool:
    """True if the value falls on today's local calendar date."""
    parsed = parse_date_input(value)
    if parsed is None:
        return False
    return parsed.date() == resolve_now(now).date()


def get_relative_time(value: object, now: DateInput = None) -> str:
    """
    Spanish relative label for a past date.

    With diff_days = floor((now - value) / 1 day):
    0 -> "Hoy", 1 -> "Ayer", <7 -> "Hace N días", <30 -> "Hace N semanas",
    <365 -> "Hace N meses" (30-day months), otherwise "Hace N años"
    (365-day years).

    Args:
        value: Date to describe
        now: Reference moment (default: now)

    Returns:
        Label, or "N/A" for an unparseable value
    """
    parsed = parse_date_input(value)
    if parsed is None:
        return NO_DATE_LABEL

    elapsed = (resolve_now(now) - parsed).total_seconds()
    diff_days = math.floor(elapsed / SECONDS_PER_DAY)

    if diff_days == 0:
        return "Hoy"
    if diff_days == 1:
        return "Ayer"
    if diff_days < DAYS_PER_WEEK:
        return f"Hace {diff_days} días"
    if diff_days < DAYS_PER_MONTH:
        return f"Hace {diff_days // DAYS_PER_WEEK} semanas"
    if diff_days < DAYS_PER_YEAR:
        return f"Hace {diff_days // DAYS_PER_MONTH} meses"
    return f"Hace {diff_days // DAYS_PER_YEAR} años"
