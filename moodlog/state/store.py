"""In-memory entry store for moodlog."""

import logging
from datetime import date
from typing import Iterable, Optional

from moodlog.models import MoodEntry
from moodlog.models.entry import new_entry_id

logger = logging.getLogger(__name__)


class EntryStore:
    """Owns the canonical sequence of mood entries.

    Entries are kept in insertion order. Identifiers are unique within the
    store; the store itself performs no validation beyond what the
    MoodEntry model enforces.
    """

    def __init__(self, entries: Optional[Iterable[MoodEntry]] = None):
        """Initialize the store.

        Args:
            entries: Optional entries to load, e.g. from the persistence layer.
        """
        self._entries: list[MoodEntry] = []
        for entry in entries or ():
            self.add(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return any(entry.id == entry_id for entry in self._entries)

    @property
    def has_entries(self) -> bool:
        return bool(self._entries)

    # ==================== Mutations ====================

    def add(self, entry: MoodEntry) -> MoodEntry:
        """Append an entry.

        An entry whose identifier is already taken is stored under a fresh
        identifier instead, so no two entries ever share one.

        Args:
            entry: Entry to append.

        Returns:
            The entry as stored.
        """
        if entry.id in self:
            fresh = entry.model_copy(update={"id": new_entry_id()})
            logger.debug("Entry id %s already taken, stored as %s", entry.id, fresh.id)
            entry = fresh
        self._entries.append(entry)
        return entry

    def delete(self, entry_id: str) -> bool:
        """Remove the entry with the given identifier.

        Args:
            entry_id: Identifier of the entry to remove.

        Returns:
            True if an entry was removed, False if none matched.
        """
        initial_length = len(self._entries)
        self._entries = [entry for entry in self._entries if entry.id != entry_id]
        return len(self._entries) < initial_length

    def update(self, entry: MoodEntry) -> bool:
        """Replace the entry that has the same identifier.

        Args:
            entry: Updated entry.

        Returns:
            True if an entry was replaced, False if none matched.
        """
        for index, existing in enumerate(self._entries):
            if existing.id == entry.id:
                self._entries[index] = entry
                return True
        return False

    def clear(self) -> None:
        """Remove every entry."""
        self._entries = []

    # ==================== Queries ====================

    def all(self) -> list[MoodEntry]:
        """Get all entries in insertion order."""
        return list(self._entries)

    def get(self, entry_id: str) -> Optional[MoodEntry]:
        """Get an entry by identifier.

        Returns:
            Entry if found, None otherwise.
        """
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def most_recent(self) -> Optional[MoodEntry]:
        """Get the entry with the latest creation timestamp.

        Entries sharing the latest timestamp resolve to the last inserted.

        Returns:
            Most recent entry, or None if the store is empty.
        """
        latest = None
        for entry in self._entries:
            if latest is None or entry.timestamp >= latest.timestamp:
                latest = entry
        return latest

    def entries_on(self, day: date) -> list[MoodEntry]:
        """Get the entries recorded for a calendar day."""
        return [entry for entry in self._entries if entry.date == day]

    def entries_between(self, start: date, end: date) -> list[MoodEntry]:
        """Get the entries dated within [start, end], both ends included."""
        return [entry for entry in self._entries if start <= entry.date <= end]
