"""MoodTracker: the object the application shell talks to.

The tracker owns one EntryStore and one FilterState. Each mutation
recomputes the filtered view and the statistics snapshot synchronously
before returning, then hands the new snapshot to subscribed listeners.
Readers therefore only ever see a snapshot that agrees with the current
entries and filter.
"""

import logging
from datetime import date
from typing import Callable, Iterable, Optional

from moodlog.analytics import build_snapshot, filter_entries
from moodlog.models import (
    DateRange,
    FilterCriteria,
    MoodCategory,
    MoodEntry,
    Preset,
    StatisticsSnapshot,
)
from moodlog.models.filters import DEFAULT_WINDOW_DAYS
from moodlog.state.clock import SystemClock
from moodlog.state.filters import FilterState
from moodlog.state.store import EntryStore

logger = logging.getLogger(__name__)

Listener = Callable[[StatisticsSnapshot], None]


class MoodTracker:
    """Entry store, filter state and derived statistics kept in step."""

    def __init__(
        self,
        clock: Optional[SystemClock] = None,
        entries: Optional[Iterable[MoodEntry]] = None,
        default_days: int = DEFAULT_WINDOW_DAYS,
    ):
        """Initialize the tracker.

        Args:
            clock: Time source. Defaults to the system clock.
            entries: Entries already loaded by the persistence layer.
            default_days: Length of the default trailing date range.
        """
        self.clock = clock or SystemClock()
        self._store = EntryStore(entries)
        self._filters = FilterState(self.clock.today(), default_days)
        self._listeners: list[Listener] = []
        self._filtered: list[MoodEntry] = []
        self._snapshot: StatisticsSnapshot
        self._recompute()

    # ==================== Subscriptions ====================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with every new snapshot.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ==================== Entry mutations ====================

    def add_entry(self, entry: MoodEntry) -> MoodEntry:
        """Add an entry and recompute.

        Returns:
            The entry as stored (re-keyed if its id was already taken).
        """
        stored = self._store.add(entry)
        logger.debug("Added entry %s (%s on %s)", stored.id, stored.category.slug, stored.date)
        self._changed()
        return stored

    def log_mood(
        self,
        category: MoodCategory,
        note: Optional[str] = None,
        context: Optional[str] = None,
        day: Optional[date] = None,
    ) -> MoodEntry:
        """Record a new mood now, for `day` or today."""
        entry = MoodEntry.create(
            category, self.clock.now(), day=day, note=note, context=context
        )
        return self.add_entry(entry)

    def delete_entry(self, entry_id: str) -> bool:
        """Delete an entry by id.

        Returns:
            True if an entry was removed. An unknown id changes nothing.
        """
        removed = self._store.delete(entry_id)
        if removed:
            logger.debug("Deleted entry %s", entry_id)
            self._changed()
        return removed

    def update_entry(self, entry: MoodEntry) -> bool:
        """Replace the entry with the same id.

        Returns:
            True if an entry was replaced. An unknown id changes nothing.
        """
        replaced = self._store.update(entry)
        if replaced:
            logger.debug("Updated entry %s", entry.id)
            self._changed()
        return replaced

    # ==================== Filter mutations ====================

    def set_category_filter(self, category: "Optional[MoodCategory | str]") -> FilterCriteria:
        """Filter by category. None shows every category."""
        criteria = self._filters.set_category_filter(category)
        self._changed()
        return criteria

    def set_date_range(self, date_range: DateRange) -> FilterCriteria:
        criteria = self._filters.set_date_range(date_range)
        self._changed()
        return criteria

    def apply_preset(self, preset: "Preset | str") -> FilterCriteria:
        """Apply a preset date range for the clock's current day.

        Raises:
            ValueError: If the preset name is unknown. State is left unchanged.
        """
        criteria = self._filters.apply_preset(preset, self.clock.today())
        self._changed()
        return criteria

    def reset_filters(self) -> FilterCriteria:
        criteria = self._filters.reset(self.clock.today())
        self._changed()
        return criteria

    def refresh(self) -> StatisticsSnapshot:
        """Recompute against the clock, e.g. after midnight has passed."""
        self._changed()
        return self._snapshot

    # ==================== Reads ====================

    def current_snapshot(self) -> StatisticsSnapshot:
        return self._snapshot

    def filtered_entries(self) -> list[MoodEntry]:
        """Entries matching the current filter, most recent first."""
        return list(self._filtered)

    def criteria(self) -> FilterCriteria:
        return self._filters.current()

    def has_active_filters(self) -> bool:
        return self._filters.current().is_active

    def is_default_range(self) -> bool:
        return self._filters.is_default_range(self.clock.today())

    def all_entries(self) -> list[MoodEntry]:
        return self._store.all()

    def get_entry(self, entry_id: str) -> Optional[MoodEntry]:
        return self._store.get(entry_id)

    def most_recent_entry(self) -> Optional[MoodEntry]:
        return self._store.most_recent()

    def total_entry_count(self) -> int:
        """Number of entries in the store, ignoring the filter."""
        return len(self._store)

    # ==================== Recomputation ====================

    def _recompute(self) -> None:
        criteria = self._filters.current()
        filtered = filter_entries(self._store.all(), criteria)
        snapshot = build_snapshot(filtered, criteria, self.clock.today())
        self._filtered = filtered
        self._snapshot = snapshot

    def _changed(self) -> None:
        self._recompute()
        logger.debug(
            "Recomputed snapshot: %d of %d entries in %s",
            self._snapshot.total_count,
            len(self._store),
            self._snapshot.date_range.display(),
        )
        for listener in list(self._listeners):
            listener(self._snapshot)
