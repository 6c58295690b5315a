"""Aggregations over filtered mood entries.

Frequency tables are sparse dictionaries: keys with no occurrences are
left out rather than stored with a zero count. Category tables iterate in
MoodCategory order and context tables in order of first appearance, which
fixes the tie-break used by `dominant`.
"""

from collections import Counter
from datetime import date, timedelta
from typing import Hashable, Iterable, Optional, TypeVar

from moodlog.models import NEUTRAL_SCORE, MoodCategory, MoodEntry, TrendPoint

K = TypeVar("K", bound=Hashable)

TREND_DAYS = 7


def category_frequency(entries: Iterable[MoodEntry]) -> dict[MoodCategory, int]:
    """Count entries per mood category.

    Args:
        entries: Entries to count.

    Returns:
        Mapping of category to count, in category order, zero counts omitted.
    """
    counts = Counter(entry.category for entry in entries)
    return {category: counts[category] for category in MoodCategory if counts[category]}


def context_frequency(entries: Iterable[MoodEntry]) -> dict[str, int]:
    """Count entries per context tag. Untagged entries are ignored."""
    counts: dict[str, int] = {}
    for entry in entries:
        if entry.context is not None:
            counts[entry.context] = counts.get(entry.context, 0) + 1
    return counts


def dominant(table: dict[K, int]) -> Optional[K]:
    """Key with the highest count.

    Ties go to the key seen first in the table's iteration order.

    Returns:
        The dominant key, or None for an empty table.
    """
    best_key = None
    best_count = 0
    for key, count in table.items():
        if count > best_count:
            best_key, best_count = key, count
    return best_key


def percentage(table: dict[K, int], key: K, total: int) -> float:
    """Share of `total` taken by `key`, in percent. 0.0 when total is 0."""
    if total == 0:
        return 0.0
    return 100 * table.get(key, 0) / total


def sorted_frequency(table: dict[K, int]) -> list[tuple[K, int]]:
    """Table items ordered by count, highest first. Equal counts keep table order."""
    return sorted(table.items(), key=lambda item: item[1], reverse=True)


def trend(entries: Iterable[MoodEntry], today: date) -> list[TrendPoint]:
    """Daily mean mood scores for the seven days ending today.

    The window is fixed and does not follow any filter date range. Days
    without entries score NEUTRAL_SCORE.

    Args:
        entries: Entries to draw scores from.
        today: Last day of the window.

    Returns:
        Seven trend points in chronological order.
    """
    window_start = today - timedelta(days=TREND_DAYS - 1)
    scores_by_day: dict[date, list[int]] = {}
    for entry in entries:
        if window_start <= entry.date <= today:
            scores_by_day.setdefault(entry.date, []).append(entry.category.score)

    points = []
    for offset in range(TREND_DAYS):
        day = window_start + timedelta(days=offset)
        scores = scores_by_day.get(day)
        score = sum(scores) / len(scores) if scores else NEUTRAL_SCORE
        points.append(TrendPoint(label=day.strftime("%a"), score=score, day=day))
    return points


def trend_change_percent(points: list[TrendPoint]) -> float:
    """Percent change from the first to the last trend score.

    Returns 0.0 for fewer than two points or a first score of 0.
    """
    if len(points) < 2:
        return 0.0
    first, last = points[0].score, points[-1].score
    if first == 0:
        return 0.0
    return (last - first) / first * 100
