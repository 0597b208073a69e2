"""
Numeric Formatting — display strings for KPI values

Total functions: they never raise and never render "nan"/"inf". A value
that is not a finite number renders as the zero of its format ("C$0",
"$0", "0", "0%", "0 kg").

Grouping comes from Babel (CLDR data) so that local currency amounts use
the es_ES separator and USD amounts the en_US one. Rounding is half-up,
as the app's amounts are entered by hand and 0.5 should never round down.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

from babel.numbers import format_decimal

from flockcalc.core.domain.units import kg_to_lb
from flockcalc.core.math.numerical_safeguards import clamp, to_finite
from flockcalc.display.locale import DEFAULT_DISPLAY_LOCALE, DisplayLocale

# Largest decimal count accepted by the fixed-decimal formatters
MAX_DECIMALS: Final[int] = 20

# Enough digits for any finite double plus MAX_DECIMALS places
_DECIMAL_PRECISION: Final[int] = 400

_PATTERN_INTEGER: Final[str] = "#,##0"
_PATTERN_CENTS: Final[str] = "#,##0.00"


def _finite_or_none(value: object) -> float | None:
    number = to_finite(value, fallback=math.nan)
    return number if math.isfinite(number) else None


def _quantize(value: float, decimals: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        exponent = Decimal(1).scaleb(-decimals)
        return Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP)


def _grouped(value: float, decimals: int, pattern: str, locale: str) -> str:
    # Babel quantizes again internally; keep it inside the wide context
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        return format_decimal(_quantize(value, decimals), format=pattern, locale=locale)


def _fixed(value: float, decimals: object) -> str:
    places = int(clamp(to_finite(decimals), 0, MAX_DECIMALS))
    return f"{_quantize(value, places):f}"


# =============================================================================
# CURRENCY
# =============================================================================


def format_currency(
    value: object,
    symbol: str | None = None,
    display: DisplayLocale = DEFAULT_DISPLAY_LOCALE,
) -> str:
    """
    Local currency amount, no decimals, locale grouping.

    Args:
        value: Amount
        symbol: Currency prefix (default: display.currency_symbol, "C$")
        display: Locale strategy

    Returns:
        e.g. "C$1.234"; symbol + "0" for a non-finite value

    Examples:
        >>> format_currency(0)
        'C$0'
        >>> format_currency(float('nan'))
        'C$0'
    """
    prefix = display.currency_symbol if symbol is None else symbol
    number = _finite_or_none(value)
    if number is None:
        return f"{prefix}0"
    amount = _grouped(number, 0, _PATTERN_INTEGER, display.number_locale)
    return f"{prefix}{amount}"


def format_usd(value: object, display: DisplayLocale = DEFAULT_DISPLAY_LOCALE) -> str:
    """
    USD amount with exactly two decimals.

    Examples:
        >>> format_usd(1000)
        '$1,000.00'
        >>> format_usd(99.99)
        '$99.99'
        >>> format_usd(float('nan'))
        '$0'
    """
    number = _finite_or_none(value)
    if number is None:
        return "$0"
    amount = _grouped(number, 2, _PATTERN_CENTS, display.usd_locale)
    return f"${amount}"


# =============================================================================
# PLAIN NUMBERS
# =============================================================================


def format_number(value: object, decimals: int = 0) -> str:
    """Fixed-decimal string without grouping; "0" for a non-finite value."""
    number = _finite_or_none(value)
    if number is None:
        return "0"
    return _fixed(number, decimals)


def format_percentage(value: object, decimals: int = 1) -> str:
    """
    Percentage on a 0-100 scale.

    Examples:
        >>> format_percentage(50)
        '50.0%'
        >>> format_percentage(33.333, 2)
        '33.33%'
    """
    number = _finite_or_none(value)
    if number is None:
        return "0%"
    return f"{_fixed(number, decimals)}%"


# =============================================================================
# WEIGHTS
# =============================================================================


def format_weight_lb(kg: object, decimals: int = 1) -> str:
    """Convert kilograms to pounds and render, e.g. "22.0 lb"."""
    return f"{_fixed(kg_to_lb(kg), decimals)} lb"


def format_weight_kg(kg: object, decimals: int = 1) -> str:
    """Render kilograms as is, e.g. "10.0 kg"; "0 kg" for a non-finite value."""
    number = _finite_or_none(kg)
    if number is None:
        return "0 kg"
    return f"{_fixed(number, decimals)} kg"
