"""Init CLI command."""

from pathlib import Path

import click
from rich.console import Console

from cli.config import write_default_config
from cli.config_models import JournalConfig

console = Console()

DEFAULT_CONFIG_PATH = Path.home() / "moodjournal" / "config.yaml"


@click.command()
@click.option(
    "--config-path",
    type=click.Path(),
    default=str(DEFAULT_CONFIG_PATH),
    help="Where to write config.yaml",
)
def init(config_path: str):
    """Create data directories and a default config."""
    config = JournalConfig()
    config.paths.journal_dir.mkdir(parents=True, exist_ok=True)
    console.print(f"[green]✓[/] journal_dir: {config.paths.journal_dir}")

    path = Path(config_path).expanduser()
    existed = path.exists()
    write_default_config(path)
    if existed:
        console.print(f"[dim]Config exists: {path}[/]")
    else:
        console.print(f"[green]✓[/] Created config: {path}")

    console.print("\n[bold]Ready![/] Try: mood-journal journal add \"Today was good\"")
