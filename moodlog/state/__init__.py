"""Mutable state owners: entry store, filter state and the tracker."""

from moodlog.state.clock import FixedClock, SystemClock
from moodlog.state.filters import ALL_TIME_RESETS_CATEGORY, FilterState, preset_range
from moodlog.state.store import EntryStore
from moodlog.state.tracker import MoodTracker

__all__ = [
    "ALL_TIME_RESETS_CATEGORY",
    "EntryStore",
    "FilterState",
    "FixedClock",
    "MoodTracker",
    "SystemClock",
    "preset_range",
]
