"""
Row collection — from a row source to an in-memory bundle of log rows

The remote store is reached through a caller-supplied RowSource. For one
batch the seven category reads run in parallel; a failing category is
logged and becomes an empty list so that the other six still produce
numbers. Only a batch whose every read failed raises CollectionError.

A LogBundle is built fresh on every call and never mutated, so two
overlapping refreshes cannot corrupt each other (the last one to finish
wins at the caller).
"""

import logging
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, NamedTuple, Protocol

from pydantic import ValidationError

from flockcalc.config import get_settings
from flockcalc.core.domain.batch import Batch
from flockcalc.core.domain.logs import (
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
from flockcalc.core.math.numerical_safeguards import safe_sum
from flockcalc.display.dates import parse_date_input
from flockcalc.exceptions import CollectionError

logger = logging.getLogger(__name__)

RawRows = Iterable[Mapping[str, Any] | LogRow] | None


class RowSource(Protocol):
    """Anything that can return the raw rows of one log table for a batch."""

    def fetch_rows(
        self, category: LogCategory, batch_id: str | int
    ) -> Iterable[Mapping[str, Any]]:
        ...


# =============================================================================
# ROW PARSING
# =============================================================================


def _parse_rows(category: LogCategory, rows: RawRows) -> tuple[LogRow, ...]:
    if rows is None:
        return ()

    model = LOG_MODELS[category]
    parsed: list[LogRow] = []
    for row in rows:
        if isinstance(row, model):
            parsed.append(row)
            continue
        try:
            parsed.append(model.model_validate(row))
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed %s row %r: %s",
                category.value,
                row.get("id") if isinstance(row, Mapping) else row,
                exc.errors(include_url=False),
            )
    return tuple(parsed)


def _event_time(row: LogRow) -> datetime | None:
    return parse_date_input(row.created_at) or parse_date_input(row.date)


# =============================================================================
# LOG BUNDLE
# =============================================================================


@dataclass(frozen=True)
class LogBundle:
    """All log rows of one batch, grouped by category."""

    feed: tuple[FeedLog, ...] = ()
    weight: tuple[WeightLog, ...] = ()
    mortality: tuple[MortalityLog, ...] = ()
    water: tuple[WaterLog, ...] = ()
    vaccination: tuple[VaccinationLog, ...] = ()
    expense: tuple[ExpenseLog, ...] = ()
    sale: tuple[SaleLog, ...] = ()

    @classmethod
    def from_rows(cls, rows: Mapping["str | LogCategory", RawRows]) -> "LogBundle":
        """
        Build a bundle from raw rows keyed by category name.

        Missing categories and None values become empty tuples; rows that
        fail model validation are skipped with a warning.

        Raises:
            UnknownLogCategory: If a key is not a log category
        """
        fields = {}
        for key, category_rows in rows.items():
            category = LogCategory.parse(key)
            fields[category.value] = _parse_rows(category, category_rows)
        return cls(**fields)

    def rows(self, category: "str | LogCategory") -> tuple[LogRow, ...]:
        return getattr(self, LogCategory.parse(category).value)

    # -------------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------------

    @property
    def total_feed_kg(self) -> float:
        return safe_sum(row.quantity_kg for row in self.feed)

    @property
    def total_feed_cost(self) -> float:
        return safe_sum(row.cost for row in self.feed)

    @property
    def total_deaths(self) -> float:
        return safe_sum(row.count for row in self.mortality)

    @property
    def total_water_liters(self) -> float:
        return safe_sum(row.liters for row in self.water)

    @property
    def total_expenses(self) -> float:
        """Expense log amounts only (feed log costs are not included)."""
        return safe_sum(row.amount for row in self.expense)

    def expenses_in(self, category: ExpenseCategory) -> float:
        return safe_sum(row.amount for row in self.expense if row.category is category)

    @property
    def total_revenue(self) -> float:
        return safe_sum(row.revenue for row in self.sale)

    @property
    def total_birds_sold(self) -> float:
        return safe_sum(row.birds_sold for row in self.sale)

    @property
    def total_sold_weight_kg(self) -> float:
        return safe_sum(row.total_weight_kg for row in self.sale)

    @property
    def latest_weight(self) -> WeightLog | None:
        """Most recent weight sample (by creation time, then date)."""
        if not self.weight:
            return None
        return max(self.weight, key=lambda row: _event_time(row) or datetime.min)

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------

    def since(
        self,
        start: datetime | None,
        categories: Iterable["str | LogCategory"] = tuple(LogCategory),
    ) -> "LogBundle":
        """
        Keep rows recorded at or after start in the given categories.

        Rows without a readable creation time (or date) are dropped from
        filtered categories. start=None returns the bundle unchanged.
        """
        if start is None:
            return self

        fields = {}
        for key in categories:
            category = LogCategory.parse(key)
            kept = tuple(
                row
                for row in self.rows(category)
                if (moment := _event_time(row)) is not None and moment >= start
            )
            fields[category.value] = kept

        return replace(self, **fields)


class BatchLogs(NamedTuple):
    """A batch together with its log rows."""

    batch: Batch
    logs: LogBundle


# =============================================================================
# COLLECTION
# =============================================================================


def collect_batch_logs(
    source: RowSource,
    batch_id: str | int,
    categories: Iterable["str | LogCategory"] = tuple(LogCategory),
    max_workers: int | None = None,
) -> LogBundle:
    """
    Fetch the log rows of one batch, one parallel read per category.

    Args:
        source: Row source (remote tables, cache, fixtures)
        batch_id: Batch to collect
        categories: Categories to read (default: all seven)
        max_workers: Thread pool size (default: settings FETCH_MAX_WORKERS)

    Returns:
        LogBundle; a category whose read failed is empty

    Raises:
        UnknownLogCategory: If a category name is unknown
        CollectionError: If every read failed
    """
    wanted = [LogCategory.parse(category) for category in categories]
    if not wanted:
        return LogBundle()

    workers = max_workers or get_settings().FETCH_MAX_WORKERS
    rows: dict[LogCategory, RawRows] = {}
    errors: dict[str, BaseException] = {}

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {
            pool.submit(source.fetch_rows, category, batch_id): category
            for category in wanted
        }
        for future in as_completed(futures):
            category = futures[future]
            try:
                rows[category] = list(future.result() or [])
            except Exception as exc:
                logger.warning(
                    "Fetching %s logs for batch %s failed: %s",
                    category.value,
                    batch_id,
                    exc,
                )
                errors[category.value] = exc
                rows[category] = []

    if len(errors) == len(wanted):
        raise CollectionError(str(batch_id), errors)

    return LogBundle.from_rows(rows)
