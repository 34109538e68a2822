"""Journal CLI commands."""

import click
import structlog
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from cli.utils import get_components
from journal.analysis import analyze_entry
from journal.emotions import coping_strategy
from shared_types import EntryType

console = Console()
logger = structlog.get_logger()

MOOD_STYLE = {
    "positive": "green",
    "neutral": "dim",
    "negative": "red",
}


@click.group()
def journal():
    """Manage journal entries."""
    pass


@journal.command("add")
@click.option(
    "-t",
    "--type",
    "entry_type",
    default="daily",
    type=click.Choice([t.value for t in EntryType]),
    help="Entry type",
)
@click.option("--title", help="Entry title (defaults to date)")
@click.option("--tags", help="Comma-separated tags")
@click.argument("content", required=False)
def journal_add(entry_type: str, title: str, tags: str, content: str):
    """Add new journal entry. Opens editor if no content provided."""
    c = get_components(with_remote=True)

    if not content:
        content = click.edit("# Write your entry here\n\n")
        if not content:
            console.print("[yellow]No content provided, cancelled.[/]")
            return

    tag_list = [t.strip() for t in tags.split(",")] if tags else []

    with console.status("Analyzing mood..."):
        analysis = analyze_entry(content, remote=c["remote"])
    if c["remote"] is not None:
        c["remote"].close()

    try:
        filepath = c["storage"].create(
            content=content,
            entry_type=entry_type,
            title=title,
            tags=tag_list,
            metadata=analysis,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)

    style = MOOD_STYLE.get(analysis["sentiment"], "dim")
    console.print(f"[green]Created:[/] {filepath.name}")
    console.print(
        f"Mood: [{style}]{analysis['sentiment']}[/] ({analysis['score']:+.2f})"
        f"  |  Emotions: {', '.join(analysis['emotions'])}"
    )
    tip = coping_strategy(analysis["emotions"])
    if tip:
        console.print(f"[dim]Tip: {tip}[/]")


@journal.command("list")
@click.option("-t", "--type", "entry_type", help="Filter by type")
@click.option("--tag", help="Filter by tag")
@click.option("-n", "--limit", default=10, help="Max entries to show")
def journal_list(entry_type: str, tag: str, limit: int):
    """List recent journal entries."""
    c = get_components()
    tags = [tag] if tag else None
    entries = c["storage"].list_entries(entry_type=entry_type, tags=tags, limit=limit)

    if not entries:
        console.print("[yellow]No entries found.[/]")
        return

    table = Table(show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Title")
    table.add_column("Mood")
    table.add_column("Tags", style="dim")

    for e in entries:
        date = e["created"][:10] if e["created"] else "?"
        tags = ", ".join(e["tags"][:3]) if e["tags"] else ""
        mood = ""
        if e.get("sentiment"):
            style = MOOD_STYLE.get(e["sentiment"], "dim")
            mood = f"[{style}]{e['sentiment']}[/]"
        table.add_row(date, e["type"], e["title"][:40], mood, tags)

    console.print(table)


@journal.command("view")
@click.argument("filename")
def journal_view(filename: str):
    """View a journal entry."""
    c = get_components()
    filepath = c["storage"].resolve(filename)
    if filepath is None:
        console.print(f"[red]Not found:[/] {filename}")
        return

    post = c["storage"].read(filepath)
    console.print(f"\n[cyan bold]{post.get('title', filepath.stem)}[/]")
    console.print(f"[dim]Type: {post.get('type')} | Created: {str(post.get('created', '?'))[:10]}[/]")
    if post.get("sentiment"):
        console.print(f"[dim]Mood: {post['sentiment']} ({float(post.get('score', 0)):+.2f})[/]")
    if post.get("tags"):
        console.print(f"[dim]Tags: {', '.join(post['tags'])}[/]")
    console.print()
    console.print(Markdown(post.content))


@journal.command("delete")
@click.argument("filename")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def journal_delete(filename: str, yes: bool):
    """Delete a journal entry."""
    c = get_components()
    filepath = c["storage"].resolve(filename)
    if filepath is None:
        console.print(f"[red]Not found:[/] {filename}")
        return

    if not yes:
        if not click.confirm(f"Delete {filepath.name}?"):
            return

    c["storage"].delete(filepath)
    console.print(f"[green]Deleted:[/] {filepath.name}")
