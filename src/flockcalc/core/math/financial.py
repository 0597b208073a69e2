"""
Financial KPIs — batch economics

Formulas:
    profit            = revenue - expenses
    margin            = profit / revenue * 100
    ROI               = profit / expenses * 100
    cost_per_bird     = total_expenses / birds_produced
    cost_per_lb       = total_expenses / total_weight_lb
    percentage_change = (new - old) / old * 100

Money values are currency agnostic. Inputs (revenue, expenses) are
non-negative; outputs may be negative (a loss, a negative margin).
Every ratio follows the "undefined ratio -> 0" policy.
"""

from flockcalc.core.math.numerical_safeguards import (
    safe_divide,
    safe_percentage,
    to_finite,
)


def calculate_profit(revenue: float, expenses: float) -> float:
    """
    Net profit. May be negative.

    No sanitization: both inputs are expected to come out of safe_sum.

    Examples:
        >>> calculate_profit(1000, 600)
        400
        >>> calculate_profit(500, 800)
        -300
    """
    return revenue - expenses


def calculate_margin(profit: object, revenue: object) -> float:
    """
    Profit as a percentage of revenue; 0.0 without revenue.
    """
    return safe_percentage(profit, revenue)


def calculate_roi(profit: object, expenses: object) -> float:
    """
    Return on investment: profit as a percentage of expenses; 0.0 without
    expenses.
    """
    return safe_percentage(profit, expenses)


def calculate_cost_per_bird(total_expenses: object, birds_produced: object) -> float:
    """
    Production cost per bird.

    Args:
        total_expenses: All batch expenses
        birds_produced: Birds that survived (initial minus deaths)

    Returns:
        Cost per bird, or 0.0 when no birds were produced
    """
    return safe_divide(total_expenses, birds_produced)


def calculate_cost_per_lb(total_expenses: object, total_weight_lb: object) -> float:
    """
    Production cost per pound of live weight sold; 0.0 without weight.
    """
    return safe_divide(total_expenses, total_weight_lb)


def calculate_percentage_change(old_value: object, new_value: object) -> float:
    """
    Relative change from old_value to new_value, in percent.

    A negative baseline is allowed (the sign of the change then follows
    the arithmetic, not the intuition); a zero or absent baseline yields 0.

    Args:
        old_value: Baseline
        new_value: Current value

    Returns:
        (new_value - old_value) / old_value * 100, or 0.0

    Examples:
        >>> calculate_percentage_change(100, 150)
        50.0
        >>> calculate_percentage_change(0, 150)
        0.0
    """
    old = to_finite(old_value)
    if old == 0:
        return 0.0
    return safe_percentage(to_finite(new_value) - old, old, signed=True)
