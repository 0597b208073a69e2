"""
Units — mass unit conversion

The only allowed way to move between kilograms (how rows are stored) and
pounds (how farmers buy feed and sell birds). Screens and reports must not
multiply by ad-hoc factors.

The two factors are independent empirical constants, not exact inverses:
kg_to_lb(lb_to_kg(x)) equals x only to about 1e-6 relative error.
No rounding happens here; rounding is a formatting concern.
"""

from typing import Final

from flockcalc.core.math.numerical_safeguards import sanitize_float, to_finite

# =============================================================================
# CONVERSION FACTORS
# =============================================================================

# Pounds per kilogram
KG_TO_LB: Final[float] = 2.20462

# Kilograms per pound
LB_TO_KG: Final[float] = 0.453592


# =============================================================================
# CONVERTERS
# =============================================================================


def kg_to_lb(kg: object) -> float:
    """
    Convert kilograms to pounds.

    Args:
        kg: Mass in kilograms

    Returns:
        Mass in pounds; 0.0 for negative, non-finite or non-numeric input

    Examples:
        >>> kg_to_lb(1)
        2.20462
        >>> kg_to_lb(-1)
        0.0
    """
    value = to_finite(kg, fallback=-1.0)
    if value < 0:
        return 0.0
    return sanitize_float(value * KG_TO_LB)


def lb_to_kg(lb: object) -> float:
    """
    Convert pounds to kilograms.

    Args:
        lb: Mass in pounds

    Returns:
        Mass in kilograms; 0.0 for negative, non-finite or non-numeric input
    """
    value = to_finite(lb, fallback=-1.0)
    if value < 0:
        return 0.0
    return sanitize_float(value * LB_TO_KG)
