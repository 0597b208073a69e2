"""
Dashboard summary — farm-wide figures over the active batches
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from flockcalc.core.domain.units import kg_to_lb
from flockcalc.core.math.financial import calculate_profit
from flockcalc.core.math.numerical_safeguards import safe_sum
from flockcalc.core.math.zootechnical import (
    calculate_birds_alive,
    calculate_mortality_rate,
)
from flockcalc.reports.collection import BatchLogs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSummary:
    active_batches: int
    birds_placed: float
    birds_alive: float
    total_deaths: float
    total_feed_lb: float
    mortality_rate: float  # deaths / birds placed, across all active batches
    total_revenue: float
    total_expenses: float
    profit: float


def summarize_dashboard(batches_with_logs: Iterable[BatchLogs]) -> DashboardSummary:
    """
    Aggregate the active batches for the home screen.

    Completed batches are ignored. Birds alive is computed per batch
    (deaths and sold birds removed, floored at zero) and then summed.

    Args:
        batches_with_logs: (batch, logs) pairs

    Returns:
        DashboardSummary; all zeros when no batch is active
    """
    active = [item for item in batches_with_logs if item.batch.is_active]
    if not active:
        logger.debug("Dashboard summary requested with no active batches")

    birds_placed = safe_sum(item.batch.placed_birds for item in active)
    total_deaths = safe_sum(item.logs.total_deaths for item in active)
    birds_alive = safe_sum(
        calculate_birds_alive(
            item.batch.placed_birds,
            item.logs.total_deaths,
            item.logs.total_birds_sold,
        )
        for item in active
    )
    total_feed_kg = safe_sum(item.logs.total_feed_kg for item in active)
    total_revenue = safe_sum(item.logs.total_revenue for item in active)
    total_expenses = safe_sum(item.logs.total_expenses for item in active)

    return DashboardSummary(
        active_batches=len(active),
        birds_placed=birds_placed,
        birds_alive=birds_alive,
        total_deaths=total_deaths,
        total_feed_lb=kg_to_lb(total_feed_kg),
        mortality_rate=calculate_mortality_rate(total_deaths, birds_placed),
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        profit=calculate_profit(total_revenue, total_expenses),
    )
