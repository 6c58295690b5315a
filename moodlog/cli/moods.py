"""Reference listings for moodlog CLI: mood levels and date presets."""

from datetime import date

import click
from rich.console import Console
from rich.table import Table

from moodlog.models import MoodCategory, Preset
from moodlog.state.filters import ALL_TIME_RESETS_CATEGORY, preset_range

console = Console()


@click.command("moods")
def list_moods() -> None:
    """Show the five mood levels and their scores."""
    table = Table(title="Mood Levels")
    table.add_column("Name", style="cyan")
    table.add_column("Emoji", justify="center")
    table.add_column("Label")
    table.add_column("Score", justify="right")

    for category in MoodCategory:
        table.add_row(category.slug, category.emoji, category.label, str(category.score))

    console.print(table)


@click.command("presets")
@click.option(
    "--today", "today_str",
    default=None,
    help="Resolve presets for this day (YYYY-MM-DD) instead of today.",
)
def list_presets(today_str: str | None) -> None:
    """Show the preset date ranges as they resolve today.

    \b
    Examples:
      moodlog presets
      moodlog presets --today 2026-02-28
    """
    try:
        today = date.fromisoformat(today_str) if today_str else date.today()
    except ValueError:
        raise click.BadParameter(f"Invalid date: {today_str}", param_hint="--today")

    table = Table(title=f"Presets for {today.isoformat()}")
    table.add_column("Preset", style="cyan")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Days", justify="right")
    table.add_column("Note", style="dim")

    for preset in Preset:
        date_range = preset_range(preset, today)
        note = "also clears mood filter" if preset in ALL_TIME_RESETS_CATEGORY else ""
        table.add_row(
            preset.value,
            date_range.start.isoformat(),
            date_range.end.isoformat(),
            str(date_range.span_days),
            note,
        )

    console.print(table)
