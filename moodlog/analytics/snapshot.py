"""Statistics snapshot assembly."""

from datetime import date
from typing import Iterable

from moodlog.analytics.aggregation import (
    category_frequency,
    context_frequency,
    dominant,
    trend,
    trend_change_percent,
)
from moodlog.analytics.view import average_score
from moodlog.models import FilterCriteria, MoodEntry, StatisticsSnapshot


def build_snapshot(
    filtered: Iterable[MoodEntry],
    criteria: FilterCriteria,
    today: date,
) -> StatisticsSnapshot:
    """Compute every statistic for the filtered entries at once.

    Args:
        filtered: Entries already passed through `filter_entries`.
        criteria: Criteria the entries were filtered with.
        today: Current day, the end of the trend window.

    Returns:
        A new snapshot. Nothing is carried over from earlier snapshots.
    """
    entries = list(filtered)
    categories = category_frequency(entries)
    contexts = context_frequency(entries)
    series = trend(entries, today)

    total = len(entries)
    span_days = criteria.date_range.span_days
    daily_average = total / span_days if span_days > 0 else 0.0

    return StatisticsSnapshot(
        date_range=criteria.date_range,
        total_count=total,
        category_frequency=categories,
        context_frequency=contexts,
        dominant_category=dominant(categories),
        dominant_context=dominant(contexts),
        trend=series,
        trend_change_percent=trend_change_percent(series),
        average_score=average_score(entries),
        span_days=max(span_days, 1),
        daily_average=daily_average,
    )
