"""Data models for moodlog."""

from moodlog.models.mood import NEUTRAL_SCORE, MoodCategory
from moodlog.models.entry import NOTE_MAX_LENGTH, SUGGESTED_CONTEXTS, MoodEntry
from moodlog.models.filters import DateRange, FilterCriteria, Preset
from moodlog.models.stats import StatisticsSnapshot, TrendPoint

__all__ = [
    "NEUTRAL_SCORE",
    "NOTE_MAX_LENGTH",
    "SUGGESTED_CONTEXTS",
    "MoodCategory",
    "MoodEntry",
    "DateRange",
    "FilterCriteria",
    "Preset",
    "StatisticsSnapshot",
    "TrendPoint",
]
