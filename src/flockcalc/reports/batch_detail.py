"""
Batch detail — KPIs for a single batch

FORMULAS:
    birds_alive     = max(0, initial - deaths - sold)
    total_weight_kg = latest avg_weight_kg * birds_alive
    FCR             = total_feed_kg / total_weight_kg
    profit          = sales - expenses

The latest weight sample stands in for the whole flock, so FCR is an
estimate between weighings. Days active run to end_date for a closed
batch and to now otherwise.
"""

from dataclasses import dataclass

from flockcalc.core.domain.batch import Batch
from flockcalc.core.domain.feed_plan import FeedRecommendation, recommend_feed
from flockcalc.core.domain.units import kg_to_lb
from flockcalc.core.math.financial import calculate_profit
from flockcalc.core.math.numerical_safeguards import sanitize_float, to_finite
from flockcalc.core.math.zootechnical import (
    calculate_birds_alive,
    calculate_fcr,
    calculate_mortality_rate,
)
from flockcalc.display.dates import DateInput, days_between, get_current_week
from flockcalc.reports.collection import LogBundle


@dataclass(frozen=True)
class BatchKpis:
    """Performance and money figures of one batch."""

    batch_id: str | int
    days_active: int
    current_week: int
    birds_placed: float
    total_deaths: float
    birds_sold: float
    birds_alive: float
    total_feed_kg: float
    total_feed_lb: float
    avg_weight_kg: float  # latest sample, 0 when never weighed
    avg_weight_lb: float
    total_weight_kg: float
    fcr: float
    mortality_rate: float
    total_water_liters: float
    vaccinations: int
    total_expenses: float
    total_sales: float
    profit: float
    feed_recommendation: FeedRecommendation | None


@dataclass(frozen=True)
class ProfitEstimate:
    """Projected result of selling the live flock today."""

    price_per_lb: float
    birds_alive: float
    avg_weight_lb: float
    estimated_revenue: float
    total_expenses: float
    estimated_profit: float


def _reference_end(batch: Batch, now: DateInput) -> DateInput:
    return batch.end_date if batch.end_date is not None else now


def compute_batch_kpis(batch: Batch, logs: LogBundle, now: DateInput = None) -> BatchKpis:
    """
    Compute the detail-screen KPIs of a batch.

    Args:
        batch: The batch
        logs: Its log rows
        now: Reference moment for open batches (default: now)

    Returns:
        BatchKpis
    """
    end = _reference_end(batch, now)

    birds_placed = batch.placed_birds
    total_deaths = logs.total_deaths
    birds_sold = logs.total_birds_sold
    birds_alive = calculate_birds_alive(birds_placed, total_deaths, birds_sold)

    latest = logs.latest_weight
    avg_weight_kg = max(0.0, to_finite(latest.avg_weight_kg)) if latest else 0.0
    total_weight_kg = sanitize_float(avg_weight_kg * birds_alive)

    total_feed_kg = logs.total_feed_kg
    total_expenses = logs.total_expenses
    total_sales = logs.total_revenue
    current_week = get_current_week(batch.start_date, now=end)

    return BatchKpis(
        batch_id=batch.id,
        days_active=max(0, days_between(batch.start_date, end)),
        current_week=current_week,
        birds_placed=birds_placed,
        total_deaths=total_deaths,
        birds_sold=birds_sold,
        birds_alive=birds_alive,
        total_feed_kg=total_feed_kg,
        total_feed_lb=kg_to_lb(total_feed_kg),
        avg_weight_kg=avg_weight_kg,
        avg_weight_lb=kg_to_lb(avg_weight_kg),
        total_weight_kg=total_weight_kg,
        fcr=calculate_fcr(total_feed_kg, total_weight_kg),
        mortality_rate=calculate_mortality_rate(total_deaths, birds_placed),
        total_water_liters=logs.total_water_liters,
        vaccinations=len(logs.vaccination),
        total_expenses=total_expenses,
        total_sales=total_sales,
        profit=calculate_profit(total_sales, total_expenses),
        feed_recommendation=recommend_feed(current_week, birds_alive),
    )


def estimate_profit(kpis: BatchKpis, price_per_lb: object) -> ProfitEstimate | None:
    """
    Profit if the live flock were sold at price_per_lb.

    estimated_revenue = birds_alive * avg_weight_lb * price_per_lb

    Returns:
        ProfitEstimate, or None when the price, the live birds or the
        average weight is not positive
    """
    price = to_finite(price_per_lb)
    if price <= 0 or kpis.birds_alive <= 0 or kpis.avg_weight_lb <= 0:
        return None

    revenue = sanitize_float(kpis.birds_alive * kpis.avg_weight_lb * price)
    return ProfitEstimate(
        price_per_lb=price,
        birds_alive=kpis.birds_alive,
        avg_weight_lb=kpis.avg_weight_lb,
        estimated_revenue=revenue,
        total_expenses=kpis.total_expenses,
        estimated_profit=calculate_profit(revenue, kpis.total_expenses),
    )
