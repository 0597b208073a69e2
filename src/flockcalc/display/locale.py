"""
DisplayLocale — injectable locale strategy for presentation functions.

Only flockcalc.display takes a locale; the KPI formulas stay locale
independent.
"""

from dataclasses import dataclass
from typing import Final

# Label rendered for a missing or unparseable date
NO_DATE_LABEL: Final[str] = "N/A"


@dataclass(frozen=True)
class DisplayLocale:
    """Locales (Babel identifiers) and symbols used to render values.

    - number_locale: grouping for local currency amounts (es_ES: 1.234.567)
    - usd_locale: grouping for USD amounts (en_US: 1,234,567.00)
    - date_locale: month names for date labels (es_ES: ene, enero)
    - currency_symbol: prefix for local currency amounts
    """
    number_locale: str = "es_ES"
    usd_locale: str = "en_US"
    date_locale: str = "es_ES"
    currency_symbol: str = "C$"


DEFAULT_DISPLAY_LOCALE: Final[DisplayLocale] = DisplayLocale()
