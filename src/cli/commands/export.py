"""Journal export CLI commands."""

from pathlib import Path

import click
from rich.console import Console

from cli.utils import get_components

console = Console()


def _export_options(f):
    f = click.option("-n", "--limit", type=int, help="Max entries")(f)
    f = click.option("-d", "--days", type=int, help="Only entries from last N days")(f)
    f = click.option("-t", "--type", "entry_type", help="Filter by entry type")(f)
    f = click.option("-o", "--output", required=True, type=click.Path(), help="Output path")(f)
    return f


def _run(fmt: str, output: str, entry_type: str, days: int, limit: int):
    from journal import JournalExporter

    c = get_components()
    exporter = JournalExporter(c["storage"])
    method = getattr(exporter, f"export_{fmt}")
    output_path = Path(output).expanduser()

    with console.status("Exporting..."):
        count = method(output_path, entry_type=entry_type, days=days, limit=limit)

    console.print(f"[green]Exported {count} entries to {output_path}[/]")


@click.group()
def export():
    """Export journal entries."""
    pass


@export.command("json")
@_export_options
def export_json(output: str, entry_type: str, days: int, limit: int):
    """Export entries to JSON."""
    _run("json", output, entry_type, days, limit)


@export.command("markdown")
@_export_options
def export_markdown(output: str, entry_type: str, days: int, limit: int):
    """Export entries to a Markdown document."""
    _run("markdown", output, entry_type, days, limit)


@export.command("csv")
@_export_options
def export_csv(output: str, entry_type: str, days: int, limit: int):
    """Export entries to CSV."""
    _run("csv", output, entry_type, days, limit)
