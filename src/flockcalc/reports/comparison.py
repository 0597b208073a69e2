"""
Batch comparison — side-by-side metrics for a selection of batches
"""

from collections.abc import Iterable
from dataclasses import dataclass

from flockcalc.core.domain.units import kg_to_lb
from flockcalc.core.math.financial import calculate_profit
from flockcalc.core.math.numerical_safeguards import sanitize_float, to_finite
from flockcalc.core.math.zootechnical import (
    calculate_birds_alive,
    calculate_fcr,
    calculate_mortality_rate,
)
from flockcalc.display.dates import DateInput, days_between
from flockcalc.reports.collection import BatchLogs


@dataclass(frozen=True)
class BatchMetrics:
    batch_id: str | int
    name: str
    days_active: int
    birds_alive: float
    total_feed_lb: float
    avg_weight_lb: float
    fcr: float
    mortality_rate: float
    total_expenses: float
    total_revenue: float
    profit: float


@dataclass(frozen=True)
class ComparisonInsights:
    best_fcr: BatchMetrics | None
    best_profit: BatchMetrics | None


def _batch_metrics(item: BatchLogs, now: DateInput) -> BatchMetrics:
    batch, logs = item
    end = batch.end_date if batch.end_date is not None else now

    birds_alive = calculate_birds_alive(
        batch.placed_birds, logs.total_deaths, logs.total_birds_sold
    )
    latest = logs.latest_weight
    avg_weight_kg = max(0.0, to_finite(latest.avg_weight_kg)) if latest else 0.0
    total_feed_kg = logs.total_feed_kg

    return BatchMetrics(
        batch_id=batch.id,
        name=batch.name,
        days_active=max(0, days_between(batch.start_date, end)),
        birds_alive=birds_alive,
        total_feed_lb=kg_to_lb(total_feed_kg),
        avg_weight_lb=kg_to_lb(avg_weight_kg),
        fcr=calculate_fcr(total_feed_kg, sanitize_float(avg_weight_kg * birds_alive)),
        mortality_rate=calculate_mortality_rate(logs.total_deaths, batch.placed_birds),
        total_expenses=logs.total_expenses,
        total_revenue=logs.total_revenue,
        profit=calculate_profit(logs.total_revenue, logs.total_expenses),
    )


def compare_batches(
    batches_with_logs: Iterable[BatchLogs], now: DateInput = None
) -> list[BatchMetrics]:
    """
    Metrics for each batch, in input order.

    Days active run to end_date for closed batches and to now otherwise.
    FCR uses the latest weight sample times the live birds.
    """
    return [_batch_metrics(item, now) for item in batches_with_logs]


def comparison_insights(metrics: Iterable[BatchMetrics]) -> ComparisonInsights:
    """
    Pick the best batches of a comparison.

    best_fcr is the lowest non-zero FCR (a 0 means no data, never "best");
    best_profit is the highest profit. Ties go to the earlier batch.

    Examples:
        >>> comparison_insights([]).best_profit is None
        True
    """
    rows = list(metrics)

    best_fcr = None
    for row in rows:
        if row.fcr > 0 and (best_fcr is None or row.fcr < best_fcr.fcr):
            best_fcr = row

    best_profit = None
    for row in rows:
        if best_profit is None or row.profit > best_profit.profit:
            best_profit = row

    return ComparisonInsights(best_fcr=best_fcr, best_profit=best_profit)
