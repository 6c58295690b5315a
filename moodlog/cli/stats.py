"""Statistics and log views for moodlog CLI.

Both commands read the JSON entry export written by the tracker app,
apply the requested filter and print the derived results.
"""

import json
import logging
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from moodlog.analytics import sorted_frequency
from moodlog.models import DateRange, MoodCategory, MoodEntry, Preset, StatisticsSnapshot
from moodlog.state import FixedClock, MoodTracker
from moodlog.state.filters import ALL_TIME_DAYS

console = Console()
logger = logging.getLogger(__name__)

TREND_BLOCKS = "▁▂▃▄▅▆▇█"


def load_entries(path: Path) -> list[MoodEntry]:
    """Load entries from a JSON export.

    The file holds either a list of entry objects or an object with an
    "entries" list.

    Args:
        path: JSON file to read.

    Returns:
        Parsed entries in file order.

    Raises:
        ValueError: If the file is not valid JSON or has the wrong shape.
        ValidationError: If an entry does not match the MoodEntry model.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path} is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("entries", [])
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a list of entries")

    entries = [MoodEntry.model_validate(item) for item in data]
    logger.info("Loaded %d entries from %s", len(entries), path)
    return entries


def build_tracker(
    entries: list[MoodEntry],
    today: Optional[date] = None,
    preset: Optional[str] = None,
    mood: Optional[str] = None,
    from_date: Optional[date] = None,
    to_date: Optional[date] = None,
    default_days: int = 7,
) -> MoodTracker:
    """Build a tracker over `entries` with the requested filter applied.

    An explicit --from/--to range wins over a preset. --from alone runs to
    today and --to alone reaches back as far as all-time. The mood filter is
    applied last, so it survives the all-time preset's category reset.

    Raises:
        ValueError: If the preset or mood name is unknown.
    """
    clock = FixedClock(datetime.combine(today, time(12))) if today else None
    tracker = MoodTracker(clock=clock, entries=entries, default_days=default_days)
    current = tracker.clock.today()

    if from_date or to_date:
        tracker.set_date_range(
            DateRange(
                start=from_date or to_date - timedelta(days=ALL_TIME_DAYS),
                end=to_date or current,
            )
        )
    elif preset:
        tracker.apply_preset(preset)

    if mood:
        tracker.set_category_filter(MoodCategory.parse(mood))

    return tracker


def format_percent(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def trend_sparkline(snapshot: StatisticsSnapshot) -> str:
    """One block character per trend day, scaled over scores 1-5."""
    blocks = []
    for point in snapshot.trend:
        index = round((point.score - 1) / 4 * (len(TREND_BLOCKS) - 1))
        blocks.append(TREND_BLOCKS[index])
    return "".join(blocks)


def _error(message: str) -> None:
    console.print(Panel(
        f"[red]{escape(message)}[/red]",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def _parse_day(value: Optional[str], option: str) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Invalid date: {value}", param_hint=option)


def _tracker_from_options(ctx: click.Context, entries_file: Path, options: dict) -> MoodTracker:
    config = (ctx.obj or {}).get("config", {})
    default_days = config.get("filter", {}).get("default_days", 7)
    try:
        entries = load_entries(entries_file)
        return build_tracker(
            entries,
            today=_parse_day(options["today_str"], "--today"),
            preset=options["preset"],
            mood=options["mood"],
            from_date=_parse_day(options["from_str"], "--from"),
            to_date=_parse_day(options["to_str"], "--to"),
            default_days=default_days,
        )
    except (ValueError, ValidationError) as e:
        _error(str(e))


def filter_options(func):
    """Shared filter options of the stats and log commands."""
    options = [
        click.argument(
            "entries_file",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
        ),
        click.option(
            "--preset",
            type=click.Choice([p.value for p in Preset]),
            default=None,
            help="Named date range (default: last 7 days).",
        ),
        click.option("--mood", default=None, help="Only this mood (e.g. happy, 🙂)."),
        click.option("--from", "from_str", default=None, help="Range start, YYYY-MM-DD."),
        click.option(
            "--to", "to_str", default=None,
            help="Range end, YYYY-MM-DD. Alone, selects everything up to it.",
        ),
        click.option("--today", "today_str", default=None, help="Treat this day as today."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command("stats")
@filter_options
@click.pass_context
def stats(ctx: click.Context, entries_file: Path, **options) -> None:
    """Show mood statistics for the filtered entries.

    ENTRIES_FILE is the JSON entry export of the tracker app.

    \b
    Examples:
      moodlog stats entries.json
      moodlog stats entries.json --preset this-month
      moodlog stats entries.json --mood happy --from 2026-01-01 --to 2026-01-31
    """
    tracker = _tracker_from_options(ctx, entries_file, options)
    config = (ctx.obj or {}).get("config", {})
    decimals = config.get("display", {}).get("percent_decimals", 1)

    snapshot = tracker.current_snapshot()
    criteria = tracker.criteria()
    mood_filter = criteria.category.label if criteria.category else "All moods"

    dominant = snapshot.dominant_category
    summary = (
        f"Range:         {snapshot.date_range.display()}\n"
        f"Mood filter:   {mood_filter}\n"
        f"Entries:       {snapshot.total_count} of {tracker.total_entry_count()}\n"
        f"Daily average: {snapshot.daily_average:.2f}\n"
        f"Most common:   {f'{dominant.emoji} {dominant.label}' if dominant else '-'}\n"
        f"Top context:   {escape(snapshot.dominant_context or '-')}"
    )
    console.print(Panel(summary, title="[bold]Mood Statistics[/bold]", border_style="cyan"))

    if snapshot.is_empty:
        console.print("[yellow]No entries match the current filter.[/yellow]")
    else:
        table = Table(title="Mood Distribution")
        table.add_column("Mood")
        table.add_column("Count", justify="right")
        table.add_column("Share", justify="right")
        for category, count in sorted_frequency(snapshot.category_frequency):
            table.add_row(
                f"{category.emoji} {category.label}",
                str(count),
                format_percent(snapshot.category_percentage(category), decimals),
            )
        console.print(table)

        if snapshot.context_frequency:
            table = Table(title="Contexts")
            table.add_column("Context", style="cyan")
            table.add_column("Count", justify="right")
            table.add_column("Share", justify="right")
            for context, count in sorted_frequency(snapshot.context_frequency):
                table.add_row(
                    escape(context),
                    str(count),
                    format_percent(snapshot.context_percentage(context), decimals),
                )
            console.print(table)

    labels = " ".join(point.label for point in snapshot.trend)
    scores = " ".join(f"{point.score:.1f}" for point in snapshot.trend)
    change = snapshot.trend_change_percent
    color = "green" if change >= 0 else "red"
    direction = "improved" if change >= 0 else "decreased"
    console.print(Panel(
        f"{trend_sparkline(snapshot)}\n{labels}\n{scores}\n\n"
        f"[{color}]Your mood has {direction} by {abs(change):.1f}% this week.[/{color}]",
        title="[bold]Weekly Trend[/bold]",
        border_style=color,
    ))


@click.command("log")
@filter_options
@click.option("--limit", type=int, default=None, help="Show at most this many entries.")
@click.pass_context
def log(ctx: click.Context, entries_file: Path, limit: Optional[int], **options) -> None:
    """List the filtered entries, most recent first.

    \b
    Examples:
      moodlog log entries.json --preset today
      moodlog log entries.json --mood neutral --limit 20
    """
    tracker = _tracker_from_options(ctx, entries_file, options)
    entries = tracker.filtered_entries()
    if limit is not None:
        entries = entries[:limit]

    if not entries:
        console.print("[yellow]No entries match the current filter.[/yellow]")
        return

    table = Table(title=f"Entries ({tracker.criteria().date_range.display()})")
    table.add_column("Date")
    table.add_column("Mood")
    table.add_column("Context", style="cyan")
    table.add_column("Note")
    table.add_column("ID", style="dim")

    for entry in entries:
        table.add_row(
            entry.date.isoformat(),
            f"{entry.category.emoji} {entry.category.label}",
            escape(entry.context or ""),
            escape(entry.note or ""),
            entry.id,
        )

    console.print(table)
