"""Filter state and preset date ranges."""

import calendar
import logging
from datetime import date, timedelta
from typing import Optional

from moodlog.models import DateRange, FilterCriteria, MoodCategory, Preset
from moodlog.models.filters import DEFAULT_WINDOW_DAYS

logger = logging.getLogger(__name__)


ALL_TIME_DAYS = 365 * 2

# Presets that also clear the category filter when applied
ALL_TIME_RESETS_CATEGORY = frozenset({Preset.ALL_TIME})


def _month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def preset_range(preset: "Preset | str", today: date) -> DateRange:
    """Resolve a preset to a concrete date range.

    Args:
        preset: Preset or preset name (e.g. 'this-week').
        today: The current calendar day.

    Returns:
        The inclusive date range the preset stands for on `today`.

    Raises:
        ValueError: If the preset name is unknown.
    """
    preset = Preset.parse(preset)

    if preset is Preset.TODAY:
        return DateRange.single(today)
    if preset is Preset.YESTERDAY:
        return DateRange.single(today - timedelta(days=1))
    if preset is Preset.THIS_WEEK:
        monday = today - timedelta(days=today.weekday())
        return DateRange(start=monday, end=monday + timedelta(days=6))
    if preset is Preset.THIS_MONTH:
        start, end = _month_bounds(today.year, today.month)
        return DateRange(start=start, end=end)
    if preset is Preset.LAST_MONTH:
        last_of_previous = today.replace(day=1) - timedelta(days=1)
        start, end = _month_bounds(last_of_previous.year, last_of_previous.month)
        return DateRange(start=start, end=end)
    if preset is Preset.LAST_7_DAYS:
        return DateRange(start=today - timedelta(days=7), end=today)
    if preset is Preset.LAST_30_DAYS:
        return DateRange(start=today - timedelta(days=30), end=today)
    # Preset.ALL_TIME
    return DateRange(start=today - timedelta(days=ALL_TIME_DAYS), end=today)


class FilterState:
    """Owns the active FilterCriteria. Every change replaces it wholesale."""

    def __init__(self, today: date, default_days: int = DEFAULT_WINDOW_DAYS):
        self._default_days = default_days
        self._criteria = FilterCriteria.default(today, default_days)

    def current(self) -> FilterCriteria:
        return self._criteria

    def set_category_filter(self, category: "Optional[MoodCategory | str]") -> FilterCriteria:
        """Replace the category filter. None matches every category.

        Raises:
            ValueError: If a category name is unknown. State is left unchanged.
        """
        self._criteria = FilterCriteria(
            category=category, date_range=self._criteria.date_range
        )
        return self._criteria

    def set_date_range(self, date_range: DateRange) -> FilterCriteria:
        """Replace the date range. Reversed ranges arrive already swapped."""
        self._criteria = FilterCriteria(
            category=self._criteria.category, date_range=date_range
        )
        return self._criteria

    def apply_preset(self, preset: "Preset | str", today: date) -> FilterCriteria:
        """Set the date range from a preset.

        Applying ALL_TIME also resets the category filter to all categories.

        Args:
            preset: Preset or preset name.
            today: The current calendar day.

        Returns:
            The new criteria.

        Raises:
            ValueError: If the preset name is unknown.
        """
        preset = Preset.parse(preset)
        category = self._criteria.category
        if preset in ALL_TIME_RESETS_CATEGORY:
            category = None
        self._criteria = FilterCriteria(
            category=category, date_range=preset_range(preset, today)
        )
        logger.debug("Applied preset %s: %s", preset.value, self._criteria.date_range.display())
        return self._criteria

    def reset(self, today: date) -> FilterCriteria:
        """Restore the default criteria: all categories, trailing window."""
        self._criteria = FilterCriteria.default(today, self._default_days)
        return self._criteria

    def is_default_range(self, today: date) -> bool:
        return self._criteria.date_range == DateRange.trailing(today, self._default_days)
