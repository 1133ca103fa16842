"""Pure aggregations over an ``EntitySnapshot``."""

from courseboard.metrics.counts import count, count_by_status
from courseboard.metrics.distribution import StatusBucket, build_status_distribution
from courseboard.metrics.payments import PaymentSummaryResult, summarize_payments
from courseboard.metrics.upcoming import is_upcoming, select_upcoming
from courseboard.metrics.view import DashboardCounts, DashboardView, compute_view

__all__ = [
    "DashboardCounts",
    "DashboardView",
    "PaymentSummaryResult",
    "StatusBucket",
    "build_status_distribution",
    "compute_view",
    "count",
    "count_by_status",
    "is_upcoming",
    "select_upcoming",
    "summarize_payments",
]
