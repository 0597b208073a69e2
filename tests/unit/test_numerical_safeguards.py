"""
Tests for the Numerical Safeguards module

Checks:
1. NaN/Inf sanitization
2. Coercion of raw row values (strings, None, Decimal, bool)
3. Safe division (signed/unsigned) and percentages
4. Summation of lists with missing values
5. Float comparison and clamping
"""

from decimal import Decimal

import pytest

from flockcalc.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    clamp,
    is_close,
    is_valid_float,
    safe_divide,
    safe_percentage,
    safe_sum,
    sanitize_array,
    sanitize_float,
    to_finite,
)

# =============================================================================
# NaN/Inf SANITIZATION
# =============================================================================


class TestIsValidFloat:
    def test_finite_values(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert is_valid_float(1e-300)

    def test_non_finite_values(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestSanitizeFloat:
    def test_finite_unchanged(self) -> None:
        assert sanitize_float(10.5) == 10.5
        assert sanitize_float(-3.0) == -3.0

    def test_nan_and_inf_use_fallback(self) -> None:
        assert sanitize_float(float("nan")) == 0.0
        assert sanitize_float(float("inf")) == 0.0
        assert sanitize_float(float("-inf"), fallback=-1.0) == -1.0


class TestToFinite:
    """Raw row values: numbers, numeric text, junk"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (12, 12.0),
            (12.5, 12.5),
            ("12.5", 12.5),
            ("  7 ", 7.0),
            ("-3", -3.0),
            (Decimal("2.25"), 2.25),
        ],
    )
    def test_numeric_values(self, raw, expected) -> None:
        assert to_finite(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [None, "", "   ", "abc", "nan", "inf", True, False, [], {}, object()],
    )
    def test_non_numeric_values_use_fallback(self, raw) -> None:
        assert to_finite(raw) == 0.0
        assert to_finite(raw, fallback=-1.0) == -1.0

    def test_non_finite_floats_use_fallback(self) -> None:
        assert to_finite(float("nan")) == 0.0
        assert to_finite(float("-inf"), fallback=5.0) == 5.0

    def test_huge_int_uses_fallback(self) -> None:
        assert to_finite(10**400) == 0.0

    def test_signaling_nan_decimal_uses_fallback(self) -> None:
        assert to_finite(Decimal("sNaN")) == 0.0


class TestSanitizeArray:
    def test_mixed_values(self) -> None:
        assert sanitize_array([1, None, "2", float("nan")]) == [1.0, 0.0, 2.0, 0.0]

    def test_custom_fallback(self) -> None:
        assert sanitize_array([None, 3], fallback=-1.0) == [-1.0, 3.0]

    def test_returns_new_list(self) -> None:
        values = [1.0, 2.0]
        result = sanitize_array(values)
        assert result == values
        assert result is not values


# =============================================================================
# SAFE DIVISION AND SUMMATION
# =============================================================================


class TestSafeDivide:
    def test_regular_division(self) -> None:
        assert safe_divide(10, 4) == 2.5

    def test_zero_denominator(self) -> None:
        assert safe_divide(10, 0) == 0.0
        assert safe_divide(10, 0, fallback=-1.0) == -1.0

    def test_negative_denominator_unsigned(self) -> None:
        assert safe_divide(10, -2) == 0.0

    def test_negative_denominator_signed(self) -> None:
        assert safe_divide(10, -2, signed=True) == -5.0

    def test_zero_denominator_signed(self) -> None:
        assert safe_divide(10, 0, signed=True) == 0.0

    def test_negative_numerator_allowed(self) -> None:
        assert safe_divide(-10, 4) == -2.5

    def test_invalid_operands(self) -> None:
        assert safe_divide(None, 5) == 0.0
        assert safe_divide("abc", 5) == 0.0
        assert safe_divide(5, None) == 0.0
        assert safe_divide(float("nan"), 5) == 0.0
        assert safe_divide(5, float("inf")) == 0.0

    def test_string_operands(self) -> None:
        assert safe_divide("9", "3") == 3.0

    def test_overflow_uses_fallback(self) -> None:
        assert safe_divide(1e308, 1e-308) == 0.0


class TestSafePercentage:
    def test_regular(self) -> None:
        assert safe_percentage(25, 200) == 12.5

    def test_undefined(self) -> None:
        assert safe_percentage(25, 0) == 0.0
        assert safe_percentage(25, -10) == 0.0

    def test_signed(self) -> None:
        assert safe_percentage(25, -100, signed=True) == -25.0

    def test_overflow_uses_zero(self) -> None:
        assert safe_percentage(1.7e308, 1) == 0.0


class TestSafeSum:
    def test_missing_values_count_as_zero(self) -> None:
        assert safe_sum([1, None, 3, None, 5]) == 9.0

    def test_empty_and_none(self) -> None:
        assert safe_sum([]) == 0.0
        assert safe_sum(None) == 0.0

    def test_strings_and_non_finite(self) -> None:
        assert safe_sum(["2.5", float("nan"), 1, "x"]) == 3.5

    def test_negative_values_kept(self) -> None:
        assert safe_sum([10, -4]) == 6.0

    def test_accepts_generators(self) -> None:
        assert safe_sum(x for x in (1, 2, 3)) == 6.0

    def test_overflow_uses_zero(self) -> None:
        assert safe_sum([1.7e308, 1.7e308]) == 0.0


# =============================================================================
# COMPARISON AND RANGES
# =============================================================================


class TestIsClose:
    def test_default_tolerances(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_close_values(self) -> None:
        assert is_close(0.1 + 0.2, 0.3)
        assert is_close(0.0, 1e-13)

    def test_distant_values(self) -> None:
        assert not is_close(1.0, 1.001)


class TestClamp:
    def test_within_bounds(self) -> None:
        assert clamp(5, 0, 10) == 5

    def test_below_and_above(self) -> None:
        assert clamp(-5, 0, 10) == 0
        assert clamp(15, 0, 10) == 10

    def test_single_bound(self) -> None:
        assert clamp(-5, min_value=0) == 0
        assert clamp(15, max_value=10) == 10
        assert clamp(15) == 15

    def test_inverted_bounds_max_wins(self) -> None:
        assert clamp(5, 10, 0) == 0

    def test_non_finite_value_sanitized_before_clamping(self) -> None:
        assert clamp(float("nan"), 0, 10) == 0
        assert clamp(float("nan"), 1, 6) == 1
        assert clamp(float("inf"), 0, 10) == 0
        assert clamp(float("nan")) == 0.0
