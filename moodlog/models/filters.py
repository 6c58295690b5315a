"""DateRange and FilterCriteria data models."""

from datetime import date, timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from moodlog.models.mood import MoodCategory


DEFAULT_WINDOW_DAYS = 7


def _as_date(value):
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            return value
    return value


def _format_day(day: date) -> str:
    return f"{day.day}/{day.month}/{day.year}"


class DateRange(BaseModel):
    """Inclusive calendar date range.

    A range given with `end` before `start` is normalised by swapping the
    two dates, so `start <= end` always holds.
    """

    start: date = Field(..., description="First day, inclusive")
    end: date = Field(..., description="Last day, inclusive")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _swap_reversed(cls, data):
        if isinstance(data, dict):
            start, end = _as_date(data.get("start")), _as_date(data.get("end"))
            if isinstance(start, date) and isinstance(end, date) and end < start:
                data = {**data, "start": end, "end": start}
        return data

    @classmethod
    def single(cls, day: date) -> "DateRange":
        return cls(start=day, end=day)

    @classmethod
    def trailing(cls, today: date, days: int = DEFAULT_WINDOW_DAYS) -> "DateRange":
        """The `days`-long window ending on `today`."""
        return cls(start=today - timedelta(days=max(days, 1) - 1), end=today)

    @property
    def span_days(self) -> int:
        """Number of days covered, counting both ends."""
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def includes(self, day: date) -> bool:
        """Whether the range covers `day` (typically today)."""
        return self.contains(day)

    def display(self) -> str:
        """Human readable form, e.g. '3 days (1/7/2026 - 3/7/2026)'."""
        start, end = _format_day(self.start), _format_day(self.end)
        span = self.span_days
        if span == 1:
            return start
        if span <= 7:
            return f"{span} days ({start} - {end})"
        return f"{start} - {end}"


class FilterCriteria(BaseModel):
    """Active view filter.

    `category=None` means every category matches. It is never represented
    by a real category such as NEUTRAL.
    """

    category: Optional[MoodCategory] = Field(
        default=None, description="Category to match, None for all"
    )
    date_range: DateRange = Field(..., description="Inclusive date range")

    model_config = {"frozen": True}

    @classmethod
    def default(cls, today: date, days: int = DEFAULT_WINDOW_DAYS) -> "FilterCriteria":
        return cls(category=None, date_range=DateRange.trailing(today, days))

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value):
        if isinstance(value, str):
            return MoodCategory.parse(value)
        return value

    @property
    def is_active(self) -> bool:
        """Whether a category filter is applied."""
        return self.category is not None

    def matches_category(self, category: MoodCategory) -> bool:
        return self.category is None or self.category == category


class Preset(str, Enum):
    """Named quick date ranges."""

    TODAY = "today"
    THIS_WEEK = "this-week"
    THIS_MONTH = "this-month"
    ALL_TIME = "all-time"
    YESTERDAY = "yesterday"
    LAST_7_DAYS = "last-7-days"
    LAST_30_DAYS = "last-30-days"
    LAST_MONTH = "last-month"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").capitalize()

    @classmethod
    def parse(cls, value: "Preset | str") -> "Preset":
        """Parse a preset name.

        Raises:
            ValueError: If the name is not a known preset.
        """
        if isinstance(value, Preset):
            return value
        key = value.strip().lower().replace("_", "-").replace(" ", "-")
        try:
            return cls(key)
        except ValueError:
            names = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown preset: {value!r} (expected one of {names})") from None
