"""
Presentation helpers: date arithmetic and labels, numeric formatting.

The only part of flockcalc that is locale aware (see DisplayLocale).
"""

from flockcalc.display.dates import (
    DAYS_PER_WEEK,
    MAX_PRODUCTION_WEEK,
    DateInput,
    days_between,
    days_to_weeks,
    format_date,
    format_date_long,
    format_date_short,
    get_current_week,
    get_relative_time,
    is_today,
    parse_date_input,
    resolve_now,
    to_iso_date_string,
)
from flockcalc.display.formatting import (
    format_currency,
    format_number,
    format_percentage,
    format_usd,
    format_weight_kg,
    format_weight_lb,
)
from flockcalc.display.locale import DEFAULT_DISPLAY_LOCALE, NO_DATE_LABEL, DisplayLocale

__all__ = [
    # Locale
    "DEFAULT_DISPLAY_LOCALE",
    "NO_DATE_LABEL",
    "DisplayLocale",
    # Dates
    "DAYS_PER_WEEK",
    "MAX_PRODUCTION_WEEK",
    "DateInput",
    "days_between",
    "days_to_weeks",
    "format_date",
    "format_date_long",
    "format_date_short",
    "get_current_week",
    "get_relative_time",
    "is_today",
    "parse_date_input",
    "resolve_now",
    "to_iso_date_string",
    # Numbers
    "format_currency",
    "format_number",
    "format_percentage",
    "format_usd",
    "format_weight_kg",
    "format_weight_lb",
]
