"""TrendPoint and StatisticsSnapshot data models."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from moodlog.models.filters import DateRange
from moodlog.models.mood import MoodCategory


class TrendPoint(BaseModel):
    """Mean mood score of a single day."""

    label: str = Field(..., description="Weekday abbreviation, e.g. 'Mon'")
    score: float = Field(..., ge=1, le=5, description="Mean category score")
    day: date = Field(..., description="Day the point covers")

    model_config = {"frozen": True}


class StatisticsSnapshot(BaseModel):
    """Every derived statistic for one state of the log and filter."""

    date_range: DateRange = Field(..., description="Filter date range")
    total_count: int = Field(..., ge=0, description="Number of filtered entries")
    category_frequency: dict[MoodCategory, int] = Field(
        default_factory=dict, description="Entries per mood, zero counts omitted"
    )
    context_frequency: dict[str, int] = Field(
        default_factory=dict, description="Entries per context tag"
    )
    dominant_category: Optional[MoodCategory] = Field(
        default=None, description="Most frequent mood"
    )
    dominant_context: Optional[str] = Field(
        default=None, description="Most frequent context tag"
    )
    trend: list[TrendPoint] = Field(..., description="Trailing seven days ending today")
    trend_change_percent: float = Field(
        default=0.0, description="Change from first to last trend score"
    )
    average_score: Optional[float] = Field(
        default=None, description="Mean score of the filtered entries"
    )
    span_days: int = Field(..., ge=1, description="Days in the date range")
    daily_average: float = Field(..., ge=0, description="Entries per day in range")

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0

    def category_percentage(self, category: MoodCategory) -> float:
        if self.total_count == 0:
            return 0.0
        return 100 * self.category_frequency.get(category, 0) / self.total_count

    @property
    def tagged_count(self) -> int:
        """Number of filtered entries carrying a context tag."""
        return sum(self.context_frequency.values())

    def context_percentage(self, context: str) -> float:
        """Share of tagged entries carrying `context`. Untagged entries are left out."""
        tagged = self.tagged_count
        if tagged == 0:
            return 0.0
        return 100 * self.context_frequency.get(context, 0) / tagged
