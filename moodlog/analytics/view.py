"""Filtered view over the entry log."""

from datetime import date
from typing import Iterable, Optional

from moodlog.models import FilterCriteria, MoodEntry


def filter_entries(entries: Iterable[MoodEntry], criteria: FilterCriteria) -> list[MoodEntry]:
    """Select the entries matching the filter criteria.

    An entry matches when its category matches (or no category filter is
    set) and its date lies within the criteria's date range, both ends
    included.

    Args:
        entries: Entries to filter.
        criteria: Active filter criteria.

    Returns:
        Matching entries, most recent first.
    """
    date_range = criteria.date_range
    matching = [
        entry
        for entry in entries
        if criteria.matches_category(entry.category) and date_range.contains(entry.date)
    ]
    return sort_by_recency(matching)


def sort_by_recency(entries: Iterable[MoodEntry]) -> list[MoodEntry]:
    """Sort entries by creation timestamp, newest first.

    The sort is stable: entries with equal timestamps keep their order.
    """
    return sorted(entries, key=lambda entry: entry.timestamp, reverse=True)


def group_by_date(entries: Iterable[MoodEntry]) -> dict[date, list[MoodEntry]]:
    """Group entries by calendar day, keeping their relative order."""
    groups: dict[date, list[MoodEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.date, []).append(entry)
    return groups


def average_score(entries: Iterable[MoodEntry]) -> Optional[float]:
    """Mean category score of the entries, or None when there are none."""
    scores = [entry.category.score for entry in entries]
    if not scores:
        return None
    return sum(scores) / len(scores)
