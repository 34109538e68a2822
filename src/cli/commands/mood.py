"""Mood tracking CLI commands."""

from datetime import date

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components

console = Console()

MOOD_BAR = {
    "positive": "[green]██[/]",
    "neutral": "[dim]██[/]",
    "negative": "[red]██[/]",
}

TREND_STYLE = {
    "improving": "[green]improving[/]",
    "stable": "[dim]stable[/]",
    "declining": "[red]declining[/]",
}

BADGE_STYLE = {
    "bronze": "[#cd7f32]bronze[/]",
    "silver": "[white]silver[/]",
    "gold": "[yellow]gold[/]",
}


@click.command()
@click.option("-d", "--days", default=30, help="Lookback days")
def mood(days: int):
    """Show mood timeline from journal entries."""
    from journal.sentiment import get_mood_history

    c = get_components()
    timeline = get_mood_history(
        c["storage"], days=days, scale=c["config"].sentiment.score_scale
    )

    if not timeline:
        console.print("[yellow]No entries found. Add journal entries to track mood.[/]")
        return

    table = Table(show_header=True, title=f"Mood - last {days} days")
    table.add_column("Date", style="dim")
    table.add_column("Mood")
    table.add_column("Score", justify="right")
    table.add_column("Entry")

    for entry in timeline:
        bar = MOOD_BAR.get(entry["label"], "[dim]██[/]")
        score_str = f"{entry['score']:+.2f}"
        table.add_row(entry["date"], bar + f" {entry['label']}", score_str, entry["title"][:35])

    console.print(table)

    scores = [e["score"] for e in timeline]
    avg = sum(scores) / len(scores) if scores else 0
    console.print(f"\n[bold]Average:[/] {avg:+.2f}  |  Entries: {len(timeline)}")


@click.command()
def forecast():
    """Forecast mood for the next five days."""
    from journal.forecast import compute_forecast
    from journal.sentiment import scored_entries

    c = get_components()
    lookback = c["config"].forecast.lookback_days
    entries = scored_entries(c["storage"], scale=c["config"].sentiment.score_scale)
    result = compute_forecast(entries, lookback_days=lookback)

    if not result.has_enough_data:
        console.print(
            "[yellow]Not enough data for a forecast yet. "
            f"Journal on at least 3 different days within {lookback} days.[/]"
        )
        return

    table = Table(show_header=True, title="Mood forecast")
    table.add_column("Date", style="dim")
    table.add_column("Day")
    table.add_column("Mood")
    table.add_column("Score", justify="right")

    for point in result.historical[-5:]:
        bar = MOOD_BAR.get(point.sentiment, "[dim]██[/]")
        table.add_row(
            point.date.isoformat(), point.date.strftime("%a"), f"{bar} {point.sentiment}",
            f"{point.score:+.2f}",
        )
    table.add_section()
    for point in result.forecast:
        bar = MOOD_BAR.get(point.sentiment, "[dim]██[/]")
        table.add_row(
            f"[italic]{point.date.isoformat()}[/]", point.date.strftime("%a"),
            f"{bar} {point.sentiment}", f"[italic]{point.score:+.2f}[/]",
        )

    console.print(table)
    console.print(
        f"\n[bold]Trend:[/] {TREND_STYLE[result.trend]}  |  "
        f"[bold]Confidence:[/] {result.confidence:.0%}"
    )
    console.print(f"\n{result.recommendation}")


@click.command()
def streak():
    """Show current journaling streak and badge."""
    from journal.forecast import to_local_datetime
    from journal.streaks import compute_streak

    c = get_components()
    entries = c["storage"].list_entries(limit=1000)
    days = [
        dt.date() for dt in (to_local_datetime(e.get("created")) for e in entries) if dt is not None
    ]
    data = compute_streak(days, date.today())

    if data.last_entry_date is None:
        console.print("[yellow]No entries yet. Write one today to start a streak.[/]")
        return

    console.print(f"[bold]Current streak:[/] {data.current_streak} day(s)")
    console.print(f"[bold]Longest streak:[/] {data.longest_streak} day(s)")
    console.print(f"[dim]Last entry: {data.last_entry_date.isoformat()}[/]")
    if data.badge_level:
        console.print(f"[bold]Badge:[/] {BADGE_STYLE[data.badge_level]}")


@click.command()
def stats():
    """Show summary stats and emotion insights."""
    from journal.stats import emotion_insights, summary_stats

    c = get_components()
    entries = c["storage"].list_entries(limit=1000)

    if not entries:
        console.print("[yellow]No entries found.[/]")
        return

    summary = summary_stats(entries, scale=c["config"].sentiment.score_scale)
    insights = emotion_insights(entries)

    table = Table(show_header=False, title="Journal stats")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Total entries", str(summary["total_entries"]))
    table.add_row("This week", str(summary["this_week"]))
    table.add_row(
        "Average mood", f"{summary['average_label']} ({summary['average_score']:+.2f})"
    )
    table.add_row("Positive entries", str(summary["positive_entries"]))
    console.print(table)

    if insights["most_common"]:
        common = ", ".join(f"{name} ({count})" for name, count in insights["most_common"])
        console.print(f"\n[bold]Most common emotions:[/] {common}")
    if insights["recent_trend"]:
        recent = ", ".join(name for name, _ in insights["recent_trend"])
        console.print(f"[bold]Lately:[/] {recent}")
