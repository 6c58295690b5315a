"""MoodEntry data model."""

import uuid
from datetime import date as date_type
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from moodlog.models.mood import MoodCategory


NOTE_MAX_LENGTH = 300

# Tags offered by the entry form. Entries may carry any other tag as well.
SUGGESTED_CONTEXTS = ("Work", "Family", "Friends", "Alone", "Health", "Exercise")


def new_entry_id() -> str:
    """Generate an opaque, never reused entry identifier."""
    return uuid.uuid4().hex


class MoodEntry(BaseModel):
    """Represents one recorded mood event."""

    id: str = Field(default_factory=new_entry_id, min_length=1, description="Entry identifier")
    category: MoodCategory = Field(..., description="Recorded mood")
    date: date_type = Field(..., description="Calendar day the mood belongs to")
    timestamp: datetime = Field(
        default_factory=datetime.now, description="Creation timestamp, used for recency"
    )
    note: Optional[str] = Field(
        default=None, max_length=NOTE_MAX_LENGTH, description="Free-text note"
    )
    context: Optional[str] = Field(
        default=None, description="Context tag (e.g. 'Work', 'Family')"
    )

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        category: MoodCategory,
        now: datetime,
        day: Optional[date_type] = None,
        note: Optional[str] = None,
        context: Optional[str] = None,
    ) -> "MoodEntry":
        """Create a new entry with a fresh identifier.

        Args:
            category: Mood being recorded.
            now: Current time, taken as the creation timestamp.
            day: Calendar day of the mood. Defaults to the day of `now`.
            note: Optional note. Empty strings are stored as None.
            context: Optional context tag. Empty strings are stored as None.

        Returns:
            The new entry.
        """
        return cls(
            id=new_entry_id(),
            category=category,
            date=day or now.date(),
            timestamp=now,
            note=note or None,
            context=context or None,
        )

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value):
        if isinstance(value, str):
            return MoodCategory.parse(value)
        return value

    @field_serializer("category")
    def _serialize_category(self, category: MoodCategory) -> str:
        return category.slug

    def with_changes(self, **changes) -> "MoodEntry":
        """Return a validated copy with some fields replaced. The id is kept."""
        data = {**self.model_dump(), **changes, "id": self.id}
        return MoodEntry(**data)
