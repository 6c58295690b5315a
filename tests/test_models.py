"""Tests for the moodlog data models.

**Feature: moodlog**
"""

from datetime import date, datetime, timedelta

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from moodlog.models import (
    NEUTRAL_SCORE,
    NOTE_MAX_LENGTH,
    DateRange,
    FilterCriteria,
    MoodCategory,
    MoodEntry,
    Preset,
)


NOW = datetime(2026, 10, 14, 9, 30)


class TestMoodCategory:
    """
    **Feature: moodlog, Property: Fixed Mood Scale**

    Five ordered categories with scores 1-5, one per emoji.
    """

    def test_five_members_in_order(self):
        assert [c.score for c in MoodCategory] == [1, 2, 3, 4, 5]
        assert list(MoodCategory)[0] is MoodCategory.VERY_SAD
        assert list(MoodCategory)[-1] is MoodCategory.AMAZING

    def test_emojis_are_unique(self):
        emojis = [c.emoji for c in MoodCategory]
        assert len(set(emojis)) == len(emojis)

    def test_neutral_score_matches_neutral_category(self):
        assert MoodCategory.NEUTRAL.score == NEUTRAL_SCORE

    @given(category=st.sampled_from(list(MoodCategory)))
    @settings(max_examples=20)
    def test_emoji_round_trip(self, category: MoodCategory):
        """*For any* category, looking up its emoji returns the category."""
        assert MoodCategory.from_emoji(category.emoji) is category

    def test_alternate_angry_glyph(self):
        assert MoodCategory.from_emoji("😡") is MoodCategory.ANGRY

    def test_unknown_emoji(self):
        assert MoodCategory.from_emoji("🐙") is None

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("happy", MoodCategory.HAPPY),
            ("HAPPY", MoodCategory.HAPPY),
            ("very-sad", MoodCategory.VERY_SAD),
            ("very_sad", MoodCategory.VERY_SAD),
            ("Very Sad", MoodCategory.VERY_SAD),
            ("🤩", MoodCategory.AMAZING),
            (" neutral ", MoodCategory.NEUTRAL),
        ],
    )
    def test_parse(self, value: str, expected: MoodCategory):
        assert MoodCategory.parse(value) is expected

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            MoodCategory.parse("ecstatic")

    def test_positive_and_negative(self):
        assert MoodCategory.HAPPY.is_positive
        assert MoodCategory.ANGRY.is_negative
        assert not MoodCategory.NEUTRAL.is_positive
        assert not MoodCategory.NEUTRAL.is_negative


class TestMoodEntry:
    """Entry creation, validation and updates."""

    def test_create_assigns_id_and_timestamp(self):
        entry = MoodEntry.create(MoodCategory.HAPPY, NOW, note="Sunny walk", context="Health")
        assert entry.id
        assert entry.timestamp == NOW
        assert entry.date == NOW.date()
        assert entry.note == "Sunny walk"
        assert entry.context == "Health"

    def test_create_for_another_day(self):
        yesterday = NOW.date() - timedelta(days=1)
        entry = MoodEntry.create(MoodCategory.ANGRY, NOW, day=yesterday)
        assert entry.date == yesterday
        assert entry.timestamp == NOW

    def test_create_stores_empty_strings_as_none(self):
        entry = MoodEntry.create(MoodCategory.NEUTRAL, NOW, note="", context="")
        assert entry.note is None
        assert entry.context is None

    @given(count=st.integers(min_value=2, max_value=50))
    @settings(max_examples=20)
    def test_ids_are_unique(self, count: int):
        """*For any* number of created entries, no identifier repeats."""
        ids = {MoodEntry.create(MoodCategory.HAPPY, NOW).id for _ in range(count)}
        assert len(ids) == count

    def test_note_length_is_bounded(self):
        MoodEntry.create(MoodCategory.HAPPY, NOW, note="x" * NOTE_MAX_LENGTH)
        with pytest.raises(ValidationError):
            MoodEntry.create(MoodCategory.HAPPY, NOW, note="x" * (NOTE_MAX_LENGTH + 1))

    def test_context_is_open_vocabulary(self):
        entry = MoodEntry.create(MoodCategory.HAPPY, NOW, context="Gardening")
        assert entry.context == "Gardening"

    def test_entries_are_immutable(self):
        entry = MoodEntry.create(MoodCategory.HAPPY, NOW)
        with pytest.raises(ValidationError):
            entry.note = "changed"

    def test_with_changes_keeps_id(self):
        entry = MoodEntry.create(MoodCategory.HAPPY, NOW, note="before")
        changed = entry.with_changes(category=MoodCategory.ANGRY, note="after", id="other")
        assert changed.id == entry.id
        assert changed.category is MoodCategory.ANGRY
        assert changed.note == "after"
        assert changed.timestamp == entry.timestamp

    def test_category_accepts_names_and_emoji(self):
        entry = MoodEntry.model_validate(
            {"id": "a1", "category": "🙂", "date": "2026-10-14", "timestamp": "2026-10-14T09:30:00"}
        )
        assert entry.category is MoodCategory.HAPPY
        entry = MoodEntry.model_validate(
            {"id": "a2", "category": "very-sad", "date": "2026-10-14"}
        )
        assert entry.category is MoodCategory.VERY_SAD

    def test_dump_uses_category_slug(self):
        entry = MoodEntry.create(MoodCategory.VERY_SAD, NOW)
        assert entry.model_dump(mode="json")["category"] == "very-sad"


class TestDateRange:
    """Inclusive ranges, normalisation and span."""

    def test_single_day_span_is_one(self):
        day = date(2026, 10, 14)
        assert DateRange(start=day, end=day).span_days == 1

    @given(
        start=st.dates(min_value=date(2020, 1, 1), max_value=date(2030, 12, 31)),
        length=st.integers(min_value=0, max_value=800),
    )
    @settings(max_examples=50)
    def test_span_counts_both_ends(self, start: date, length: int):
        """*For any* range, span_days is the day difference plus one."""
        date_range = DateRange(start=start, end=start + timedelta(days=length))
        assert date_range.span_days == length + 1

    @given(
        a=st.dates(min_value=date(2020, 1, 1), max_value=date(2030, 12, 31)),
        b=st.dates(min_value=date(2020, 1, 1), max_value=date(2030, 12, 31)),
    )
    @settings(max_examples=50)
    def test_reversed_range_is_swapped(self, a: date, b: date):
        """*For any* pair of dates, the resulting range has start <= end."""
        date_range = DateRange(start=a, end=b)
        assert date_range.start == min(a, b)
        assert date_range.end == max(a, b)

    def test_reversed_iso_strings_are_swapped(self):
        date_range = DateRange.model_validate({"start": "2026-10-14", "end": "2026-10-01"})
        assert date_range.start == date(2026, 10, 1)
        assert date_range.end == date(2026, 10, 14)

    def test_contains_is_inclusive(self):
        date_range = DateRange(start=date(2026, 10, 1), end=date(2026, 10, 7))
        assert date_range.contains(date(2026, 10, 1))
        assert date_range.contains(date(2026, 10, 7))
        assert not date_range.contains(date(2026, 9, 30))
        assert not date_range.contains(date(2026, 10, 8))

    def test_trailing_window(self):
        date_range = DateRange.trailing(date(2026, 10, 14))
        assert date_range.start == date(2026, 10, 8)
        assert date_range.end == date(2026, 10, 14)
        assert date_range.span_days == 7

    def test_display(self):
        assert DateRange.single(date(2026, 7, 3)).display() == "3/7/2026"
        assert (
            DateRange(start=date(2026, 7, 1), end=date(2026, 7, 3)).display()
            == "3 days (1/7/2026 - 3/7/2026)"
        )
        assert (
            DateRange(start=date(2026, 7, 1), end=date(2026, 7, 31)).display()
            == "1/7/2026 - 31/7/2026"
        )


class TestFilterCriteria:
    """Wildcard category handling."""

    def test_default_is_wildcard_over_trailing_week(self):
        criteria = FilterCriteria.default(date(2026, 10, 14))
        assert criteria.category is None
        assert not criteria.is_active
        assert criteria.date_range.span_days == 7
        assert criteria.date_range.end == date(2026, 10, 14)

    @given(category=st.sampled_from(list(MoodCategory)))
    @settings(max_examples=20)
    def test_wildcard_matches_every_category(self, category: MoodCategory):
        criteria = FilterCriteria.default(date(2026, 10, 14))
        assert criteria.matches_category(category)

    def test_neutral_is_a_real_filter(self):
        criteria = FilterCriteria(
            category=MoodCategory.NEUTRAL,
            date_range=DateRange.single(date(2026, 10, 14)),
        )
        assert criteria.is_active
        assert criteria.matches_category(MoodCategory.NEUTRAL)
        assert not criteria.matches_category(MoodCategory.HAPPY)


class TestPreset:
    def test_parse_names(self):
        assert Preset.parse("today") is Preset.TODAY
        assert Preset.parse("This Week") is Preset.THIS_WEEK
        assert Preset.parse("all_time") is Preset.ALL_TIME
        assert Preset.parse(Preset.THIS_MONTH) is Preset.THIS_MONTH

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            Preset.parse("fortnight")
