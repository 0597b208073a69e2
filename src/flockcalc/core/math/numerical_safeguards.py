"""
Numerical Safeguards — Safe Math Primitives

Every KPI in flockcalc is computed from numbers that arrive straight from
remote rows: nullable columns, numeric strings, the occasional NaN from a
failed parse. This module is the single place where such values are turned
into finite floats, so the formulas built on top of it stay short.

The module provides:
- Coercion of heterogeneous inputs (None, str, Decimal, int, float) to float
- NaN/Inf sanitization so invalid values never reach the caller
- Safe division with the "undefined ratio -> 0" policy
- Safe summation of sequences with missing entries
- Float comparison with tolerance and range clamping

CRITICAL INVARIANTS:
1. Division by a zero (or, unless signed, non-positive) denominator returns
   the fallback, never Inf/NaN
2. NaN/Inf never propagate (they are replaced by the fallback)
3. No function in this module raises on bad numeric input
4. All operations are deterministic and side-effect free
"""

import math
import numbers
from collections.abc import Iterable
from decimal import Decimal
from typing import Final

# =============================================================================
# TOLERANCES
# =============================================================================

# Relative tolerance for float comparisons in is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Absolute tolerance for float comparisons in is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf SANITIZATION
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is usable (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite, False for NaN or Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Replace NaN/Inf with a fallback value.

    Args:
        value: Original value
        fallback: Replacement for NaN/Inf (default: 0.0)

    Returns:
        value if finite, otherwise fallback

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


def to_finite(value: object, fallback: float = 0.0) -> float:
    """
    Coerce an arbitrary row value to a finite float.

    Accepts ints, floats, Decimals and numeric strings (remote numeric
    columns are frequently serialized as text). Booleans, None, empty
    strings, unparseable strings and any other type yield the fallback.

    Args:
        value: Raw value taken from a row or a form
        fallback: Value returned when no finite float can be produced

    Returns:
        Finite float or fallback

    Examples:
        >>> to_finite("12.5")
        12.5
        >>> to_finite(None)
        0.0
        >>> to_finite("abc", fallback=-1.0)
        -1.0
        >>> to_finite(float('inf'))
        0.0
    """
    if value is None or isinstance(value, bool):
        return fallback

    try:
        if isinstance(value, (numbers.Real, Decimal)):
            number = float(value)
        elif isinstance(value, str):
            text = value.strip()
            if not text:
                return fallback
            number = float(text)
        else:
            return fallback
    except (ValueError, OverflowError):
        # Signaling NaN Decimals, ints too large for a double, bad strings
        return fallback

    return sanitize_float(number, fallback=fallback)


def sanitize_array(values: Iterable[object], fallback: float = 0.0) -> list[float]:
    """
    Coerce every element of a sequence with to_finite.

    Args:
        values: Iterable of raw values (may contain None)
        fallback: Replacement for invalid elements

    Returns:
        New list of finite floats
    """
    return [to_finite(v, fallback) for v in values]


# =============================================================================
# SAFE DIVISION AND SUMMATION
# =============================================================================


def safe_divide(
    numerator: object,
    denominator: object,
    fallback: float = 0.0,
    signed: bool = False,
) -> float:
    """
    Division with the "undefined ratio -> 0" policy.

    Both operands go through to_finite first. An undefined ratio returns
    the fallback instead of Inf/NaN:
    - unsigned (default): denominator <= 0
    - signed: denominator == 0 (negative denominators are legitimate,
      e.g. a percentage change from a negative baseline)

    Args:
        numerator: Dividend (invalid -> 0)
        denominator: Divisor (invalid -> 0, which yields fallback)
        fallback: Value for an undefined ratio (default: 0.0)
        signed: Accept negative denominators (default: False)

    Returns:
        numerator / denominator, or fallback

    Examples:
        >>> safe_divide(10.0, 2.0)
        5.0
        >>> safe_divide(10.0, 0.0)
        0.0
        >>> safe_divide(10.0, -2.0)
        0.0
        >>> safe_divide(10.0, -2.0, signed=True)
        -5.0
    """
    num_clean = to_finite(numerator)
    denom_clean = to_finite(denominator)

    if denom_clean == 0.0:
        return fallback

    if not signed and denom_clean < 0:
        return fallback

    try:
        result = num_clean / denom_clean
    except (ZeroDivisionError, OverflowError):
        return fallback

    return sanitize_float(result, fallback=fallback)


def safe_sum(values: Iterable[object] | None) -> float:
    """
    Sum a sequence of numeric-or-absent values.

    None, non-numeric and non-finite entries count as 0. A None sequence is
    treated as empty.

    Args:
        values: Iterable of raw values

    Returns:
        Finite sum (0.0 for an empty sequence)

    Examples:
        >>> safe_sum([1, None, 3, None, 5])
        9.0
        >>> safe_sum([])
        0.0
        >>> safe_sum(["2.5", float('nan'), 1])
        3.5
    """
    if values is None:
        return 0.0

    total = 0.0
    for value in values:
        total += to_finite(value)

    # Adding finite doubles can still overflow
    return sanitize_float(total)


def safe_percentage(part: object, whole: object, signed: bool = False) -> float:
    """
    part / whole expressed on a 0-100 scale, with safe_divide semantics.

    Examples:
        >>> safe_percentage(10, 100)
        10.0
        >>> safe_percentage(10, 0)
        0.0
    """
    return sanitize_float(safe_divide(part, whole, signed=signed) * 100)


# =============================================================================
# COMPARISON AND RANGES
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Float comparison with tolerance.

    abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: First value
        b: Second value
        rel_tol: Relative tolerance (default: 1e-9)
        abs_tol: Absolute tolerance (default: 1e-12)

    Returns:
        True if the values are close
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Restrict a value to [min_value, max_value].

    Computed as min(max(value, min_value), max_value), so when the bounds
    are inverted max_value wins. NaN/Inf values are replaced with 0 before
    clamping.

    Args:
        value: Original value
        min_value: Lower bound (optional)
        max_value: Upper bound (optional)

    Returns:
        Clamped value

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-5, 0, 10)
        0
        >>> clamp(15, 0, 10)
        10
        >>> clamp(float('nan'), 1, 6)
        1
    """
    result = sanitize_float(value)

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
