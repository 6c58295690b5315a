"""moodlog - derived statistics over a personal mood log."""

__version__ = "0.1.0"
