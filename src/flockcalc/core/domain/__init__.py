"""
Domain models and value objects.

Contains the batch and log-row models, mass unit conversion and the
weekly feed plan.
"""

from flockcalc.core.domain.batch import Batch, BatchStatus
from flockcalc.core.domain.feed_plan import (
    FEED_PLAN,
    SACK_WEIGHT_LB,
    FeedPlanTier,
    FeedRecommendation,
    get_feed_plan_week,
    recommend_feed,
)
from flockcalc.core.domain.logs import (
    EXPENSE_CATEGORY_LABELS,
    LOG_MODELS,
    ExpenseCategory,
    ExpenseLog,
    FeedLog,
    LogCategory,
    LogRow,
    MortalityLog,
    SaleLog,
    VaccinationLog,
    WaterLog,
    WeightLog,
)
from flockcalc.core.domain.units import KG_TO_LB, LB_TO_KG, kg_to_lb, lb_to_kg

__all__ = [
    # Units module
    "KG_TO_LB",
    "LB_TO_KG",
    "kg_to_lb",
    "lb_to_kg",
    # Batch model
    "Batch",
    "BatchStatus",
    # Log models
    "EXPENSE_CATEGORY_LABELS",
    "LOG_MODELS",
    "ExpenseCategory",
    "ExpenseLog",
    "FeedLog",
    "LogCategory",
    "LogRow",
    "MortalityLog",
    "SaleLog",
    "VaccinationLog",
    "WaterLog",
    "WeightLog",
    # Feed plan
    "FEED_PLAN",
    "SACK_WEIGHT_LB",
    "FeedPlanTier",
    "FeedRecommendation",
    "get_feed_plan_week",
    "recommend_feed",
]
