"""
Feed plan — weekly broiler feeding tiers

Six weekly tiers of the commercial feeding programme used on the farms
(pre-starter, starter, finisher), in pounds of feed per bird per week.
Week numbers come from flockcalc.display.dates.get_current_week, which
already caps them at 6.

FORMULAS:
    weekly_lb = lb_per_bird * birds_alive
    daily_lb  = weekly_lb / 7
    sacks     = weekly_lb / 100      (100 lb sacks)
"""

from typing import Final, NamedTuple

from flockcalc.core.math.numerical_safeguards import clamp, to_finite

# Feed is sold in 100 lb sacks
SACK_WEIGHT_LB: Final[float] = 100.0

_DAYS_PER_WEEK: Final[int] = 7


class FeedPlanTier(NamedTuple):
    """One week of the feeding programme"""

    week: int
    product: str
    days: str  # age range covered, as printed on the plan
    lb_per_bird: float


FEED_PLAN: Final[tuple[FeedPlanTier, ...]] = (
    FeedPlanTier(1, "Pre-Iniciarina", "0-7", 0.45),
    FeedPlanTier(2, "Iniciarina", "8-14", 0.85),
    FeedPlanTier(3, "Iniciarina", "15-21", 1.1),
    FeedPlanTier(4, "Engordina", "22-28", 1.8),
    FeedPlanTier(5, "Engordina", "29-35", 2.4),
    FeedPlanTier(6, "Engordina", "36-45", 2.6),
)


class FeedRecommendation(NamedTuple):
    """Feed to supply for the current week"""

    tier: FeedPlanTier
    birds_alive: float
    weekly_lb: float
    daily_lb: float
    sacks_weekly: float


def get_feed_plan_week(week: object) -> FeedPlanTier:
    """
    Tier for a 1-based week number.

    Weeks past the end of the plan use the last tier; anything below 1
    (or not a number) uses the first.

    Examples:
        >>> get_feed_plan_week(2).product
        'Iniciarina'
        >>> get_feed_plan_week(9).week
        6
    """
    index = int(clamp(to_finite(week, fallback=1.0), 1, len(FEED_PLAN))) - 1
    return FEED_PLAN[index]


def recommend_feed(week: object, birds_alive: object) -> FeedRecommendation | None:
    """
    Weekly and daily feed for the live flock.

    Args:
        week: Current production week
        birds_alive: Birds still in the house

    Returns:
        FeedRecommendation, or None when there are no live birds
    """
    birds = to_finite(birds_alive)
    if birds <= 0:
        return None

    tier = get_feed_plan_week(week)
    weekly_lb = tier.lb_per_bird * birds
    return FeedRecommendation(
        tier=tier,
        birds_alive=birds,
        weekly_lb=weekly_lb,
        daily_lb=weekly_lb / _DAYS_PER_WEEK,
        sacks_weekly=weekly_lb / SACK_WEIGHT_LB,
    )
