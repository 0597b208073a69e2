"""
Zootechnical KPIs — flock performance formulas

Formulas:
    FCR            = total_feed / total_weight_gained     (same mass unit)
    mortality_rate = deaths / initial_quantity * 100
    birds_alive    = max(0, initial_quantity - deaths - sold)
    avg_weight     = total_weight / bird_count

All functions are unit agnostic (they use whatever unit the caller passes)
and follow the "undefined ratio -> 0" policy: a zero or non-positive
denominator, a negative physical input or a non-finite value yields 0.
A 0 therefore also means "no data yet"; callers cannot tell the two apart.
"""

from flockcalc.core.math.numerical_safeguards import (
    safe_divide,
    safe_percentage,
    to_finite,
)


def calculate_fcr(total_feed: object, total_weight_gained: object) -> float:
    """
    Feed Conversion Ratio: feed consumed per unit of weight gained.

    Lower is better; a broiler batch typically closes around 1.6-1.9.

    Args:
        total_feed: Feed consumed (kg or lb)
        total_weight_gained: Live weight gained, in the same unit

    Returns:
        total_feed / total_weight_gained, or 0.0 when the weight is not
        positive or the feed is zero, negative or non-finite

    Examples:
        >>> calculate_fcr(100, 50)
        2.0
        >>> calculate_fcr(100, 0)
        0.0
    """
    feed = to_finite(total_feed)
    if feed <= 0:
        return 0.0
    return safe_divide(feed, total_weight_gained)


def calculate_mortality_rate(deaths: object, initial_quantity: object) -> float:
    """
    Cumulative mortality as a percentage (0-100) of the initial batch size.

    Args:
        deaths: Total dead birds
        initial_quantity: Birds placed at batch start

    Returns:
        Percentage, or 0.0 for negative/invalid deaths or a non-positive
        initial quantity
    """
    dead = to_finite(deaths)
    if dead <= 0:
        return 0.0
    return safe_percentage(dead, initial_quantity)


def calculate_birds_alive(
    initial_quantity: object,
    deaths: object,
    sold: object = 0,
) -> float:
    """
    Birds still in the house. Never negative.

    Args:
        initial_quantity: Birds placed at batch start
        deaths: Total dead birds
        sold: Birds already sold (default: 0)

    Returns:
        max(0, initial_quantity - deaths - sold)

    Examples:
        >>> calculate_birds_alive(500, 10, 50)
        440.0
        >>> calculate_birds_alive(100, 150, 0)
        0.0
    """
    alive = to_finite(initial_quantity) - to_finite(deaths) - to_finite(sold)
    return max(0.0, alive)


def calculate_avg_weight_per_bird(total_weight: object, bird_count: object) -> float:
    """Average weight per bird; 0.0 when there are no birds."""
    return safe_divide(total_weight, bird_count)
