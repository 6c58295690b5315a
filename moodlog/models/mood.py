"""MoodCategory data model."""

from enum import Enum
from typing import Optional


NEUTRAL_SCORE = 3.0

# Alternate glyphs the mood picker has used for the same category
_EMOJI_ALIASES = {
    "😡": "😠",
}


class MoodCategory(Enum):
    """The five fixed mood levels, ordered from worst to best."""

    VERY_SAD = ("😢", "Very Sad", 1)
    ANGRY = ("😠", "Angry", 2)
    NEUTRAL = ("😐", "Neutral", 3)
    HAPPY = ("🙂", "Happy", 4)
    AMAZING = ("🤩", "Amazing", 5)

    def __init__(self, emoji: str, label: str, score: int):
        self.emoji = emoji
        self.label = label
        self.score = score

    @property
    def slug(self) -> str:
        """Command-line friendly name, e.g. 'very-sad'."""
        return self.name.lower().replace("_", "-")

    @property
    def is_positive(self) -> bool:
        return self.score > NEUTRAL_SCORE

    @property
    def is_negative(self) -> bool:
        return self.score < NEUTRAL_SCORE

    @classmethod
    def from_emoji(cls, emoji: str) -> Optional["MoodCategory"]:
        """Look up the category for an emoji.

        Args:
            emoji: Emoji glyph as selected in the mood picker.

        Returns:
            The matching category, or None for an unknown glyph.
        """
        emoji = _EMOJI_ALIASES.get(emoji, emoji)
        for category in cls:
            if category.emoji == emoji:
                return category
        return None

    @classmethod
    def parse(cls, value: str) -> "MoodCategory":
        """Parse a category from its slug, member name, label or emoji.

        Args:
            value: User supplied mood name (e.g. 'happy', 'Very Sad', '🙂').

        Returns:
            The matching category.

        Raises:
            ValueError: If the value names no category.
        """
        by_emoji = cls.from_emoji(value.strip())
        if by_emoji is not None:
            return by_emoji

        key = value.strip().lower().replace("_", "-").replace(" ", "-")
        for category in cls:
            if key in (category.slug, category.label.lower().replace(" ", "-")):
                return category

        raise ValueError(f"Unknown mood: {value!r}")
