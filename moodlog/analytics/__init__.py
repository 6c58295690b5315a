"""Derived views and statistics over the mood log."""

from moodlog.analytics.aggregation import (
    category_frequency,
    context_frequency,
    dominant,
    percentage,
    sorted_frequency,
    trend,
    trend_change_percent,
)
from moodlog.analytics.snapshot import build_snapshot
from moodlog.analytics.view import (
    average_score,
    filter_entries,
    group_by_date,
    sort_by_recency,
)

__all__ = [
    "average_score",
    "build_snapshot",
    "category_frequency",
    "context_frequency",
    "dominant",
    "filter_entries",
    "group_by_date",
    "percentage",
    "sort_by_recency",
    "sorted_frequency",
    "trend",
    "trend_change_percent",
]
