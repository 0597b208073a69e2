"""
Screen-level reducers: from a batch and its log rows to the numbers a
screen shows (dashboard, batch detail, comparison, finance).
"""

from flockcalc.reports.batch_detail import (
    BatchKpis,
    ProfitEstimate,
    compute_batch_kpis,
    estimate_profit,
)
from flockcalc.reports.collection import (
    BatchLogs,
    LogBundle,
    RowSource,
    collect_batch_logs,
)
from flockcalc.reports.comparison import (
    BatchMetrics,
    ComparisonInsights,
    compare_batches,
    comparison_insights,
)
from flockcalc.reports.dashboard import DashboardSummary, summarize_dashboard
from flockcalc.reports.finance import (
    BatchFinance,
    CategoryShare,
    FinancePeriod,
    FinanceReport,
    build_finance_report,
    period_start,
)

__all__ = [
    # Collection
    "BatchLogs",
    "LogBundle",
    "RowSource",
    "collect_batch_logs",
    # Dashboard
    "DashboardSummary",
    "summarize_dashboard",
    # Batch detail
    "BatchKpis",
    "ProfitEstimate",
    "compute_batch_kpis",
    "estimate_profit",
    # Comparison
    "BatchMetrics",
    "ComparisonInsights",
    "compare_batches",
    "comparison_insights",
    # Finance
    "BatchFinance",
    "CategoryShare",
    "FinancePeriod",
    "FinanceReport",
    "build_finance_report",
    "period_start",
]
