"""
Finance report — revenue, costs and returns over a period

Expense, sale and feed rows are kept when they were recorded on or after
the start of the period; mortality is never filtered (birds produced is
a whole-batch figure).

PER BATCH:
    expenses      = expense log amounts + feed log costs
    feed_cost     = feed log costs + 'feed' expense amounts
    other_cost    = expenses - chick_cost - feed_cost
    cost_per_bird = expenses / (initial - deaths)
    cost_per_lb   = expenses / sold weight (lb)

A 'feed' expense is counted once in expenses but appears in both
feed_cost and the expense amounts, so other_cost can be negative when
feed is booked as an expense.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from dateutil.relativedelta import relativedelta

from flockcalc.core.domain.logs import ExpenseCategory, LogCategory
from flockcalc.core.domain.units import kg_to_lb
from flockcalc.core.math.financial import (
    calculate_cost_per_bird,
    calculate_cost_per_lb,
    calculate_margin,
    calculate_profit,
    calculate_roi,
)
from flockcalc.core.math.numerical_safeguards import safe_percentage, safe_sum
from flockcalc.display.dates import DateInput, resolve_now
from flockcalc.reports.collection import BatchLogs

logger = logging.getLogger(__name__)

_PERIOD_FILTERED = (LogCategory.EXPENSE, LogCategory.SALE, LogCategory.FEED)


class FinancePeriod(str, Enum):
    """Reporting windows offered by the finance screen"""

    MONTH = "month"
    THREE_MONTHS = "3months"
    YEAR = "year"
    ALL = "all"


def period_start(period: "str | FinancePeriod", now: DateInput = None) -> datetime | None:
    """
    Local midnight at which a reporting period begins.

    Args:
        period: month, 3months, year or all
        now: Reference moment (default: now)

    Returns:
        First day of the current month, first day of the month two months
        back, January 1st, or None for 'all'

    Raises:
        ValueError: If period is not a known period

    Examples:
        >>> period_start("3months", now="2025-01-15")
        datetime.datetime(2024, 11, 1, 0, 0)
    """
    period = FinancePeriod(period)
    if period is FinancePeriod.ALL:
        return None

    month_start = resolve_now(now).replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if period is FinancePeriod.MONTH:
        return month_start
    if period is FinancePeriod.THREE_MONTHS:
        return month_start - relativedelta(months=2)
    return month_start.replace(month=1)


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class BatchFinance:
    batch_id: str | int
    name: str
    revenue: float
    expenses: float
    chick_cost: float
    feed_cost: float
    other_cost: float
    profit: float
    margin: float
    roi: float
    cost_per_bird: float
    cost_per_lb: float
    birds_sold: float
    weight_lb: float


@dataclass(frozen=True)
class CategoryShare:
    category: ExpenseCategory
    label: str
    amount: float
    percent: float  # of all categorised expenses


@dataclass(frozen=True)
class FinanceReport:
    period: FinancePeriod
    start: datetime | None
    total_revenue: float
    total_expenses: float
    profit: float
    margin: float
    roi: float
    batches: list[BatchFinance]  # profit descending
    expenses_by_category: dict[ExpenseCategory, float]

    def category_breakdown(self) -> list[CategoryShare]:
        """
        Categories with a positive amount, largest first, with their share
        of the total. Empty when nothing was spent.
        """
        total = safe_sum(self.expenses_by_category.values())
        if total == 0:
            return []

        shares = [
            CategoryShare(
                category=category,
                label=category.label,
                amount=amount,
                percent=safe_percentage(amount, total),
            )
            for category, amount in self.expenses_by_category.items()
            if amount > 0
        ]
        return sorted(shares, key=lambda share: share.amount, reverse=True)


# =============================================================================
# REPORT
# =============================================================================


def _batch_finance(item: BatchLogs) -> BatchFinance:
    batch, logs = item

    feed_cost_from_logs = logs.total_feed_cost
    expenses = logs.total_expenses + feed_cost_from_logs
    chick_cost = logs.expenses_in(ExpenseCategory.CHICKS)
    feed_cost = feed_cost_from_logs + logs.expenses_in(ExpenseCategory.FEED)
    revenue = logs.total_revenue
    profit = calculate_profit(revenue, expenses)
    birds_produced = max(0.0, batch.placed_birds - logs.total_deaths)
    weight_lb = kg_to_lb(logs.total_sold_weight_kg)

    return BatchFinance(
        batch_id=batch.id,
        name=batch.name,
        revenue=revenue,
        expenses=expenses,
        chick_cost=chick_cost,
        feed_cost=feed_cost,
        other_cost=expenses - chick_cost - feed_cost,
        profit=profit,
        margin=calculate_margin(profit, revenue),
        roi=calculate_roi(profit, expenses),
        cost_per_bird=calculate_cost_per_bird(expenses, birds_produced),
        cost_per_lb=calculate_cost_per_lb(expenses, weight_lb),
        birds_sold=logs.total_birds_sold,
        weight_lb=weight_lb,
    )


def build_finance_report(
    batches_with_logs: Iterable[BatchLogs],
    period: "str | FinancePeriod" = FinancePeriod.ALL,
    now: DateInput = None,
) -> FinanceReport:
    """
    Build the finance report of every batch for a period.

    Batches with neither revenue nor expenses in the period are left out
    of the per-batch rows (they add nothing to the totals either).

    Args:
        batches_with_logs: (batch, logs) pairs
        period: Reporting window (default: all time)
        now: Reference moment for the window (default: now)

    Returns:
        FinanceReport

    Raises:
        ValueError: If period is not a known period
    """
    period = FinancePeriod(period)
    start = period_start(period, now)

    rows: list[BatchFinance] = []
    by_category = {category: 0.0 for category in ExpenseCategory}

    for batch, logs in batches_with_logs:
        in_period = logs.since(start, _PERIOD_FILTERED)

        for expense in in_period.expense:
            by_category[expense.category] = safe_sum(
                (by_category[expense.category], expense.amount)
            )
        if in_period.total_feed_cost > 0:
            by_category[ExpenseCategory.FEED] = safe_sum(
                (by_category[ExpenseCategory.FEED], in_period.total_feed_cost)
            )

        finance = _batch_finance(BatchLogs(batch, in_period))
        if finance.revenue > 0 or finance.expenses > 0:
            rows.append(finance)

    if not rows:
        logger.debug("No financial activity for period %s", period.value)

    total_revenue = safe_sum(row.revenue for row in rows)
    total_expenses = safe_sum(row.expenses for row in rows)
    profit = calculate_profit(total_revenue, total_expenses)

    return FinanceReport(
        period=period,
        start=start,
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        profit=profit,
        margin=calculate_margin(profit, total_revenue),
        roi=calculate_roi(profit, total_expenses),
        batches=sorted(rows, key=lambda row: row.profit, reverse=True),
        expenses_by_category=by_category,
    )
