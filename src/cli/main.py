"""CLI entry point for Mood Journal."""

import click

from cli.commands import export, forecast, init, journal, mood, stats, streak
from cli.config import load_config
from cli.logging_config import setup_logging


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
def cli(verbose: bool, json_logs: bool):
    """Mood Journal - write, track and forecast your mood."""
    try:
        config = load_config()
        level = config.logging.level
        json_mode = json_logs or config.logging.json_mode
    except ValueError:
        # Commands report config errors themselves
        level, json_mode = "INFO", json_logs
    setup_logging(json_mode=json_mode, level="DEBUG" if verbose else level)


cli.add_command(journal)
cli.add_command(mood)
cli.add_command(forecast)
cli.add_command(streak)
cli.add_command(stats)
cli.add_command(export)
cli.add_command(init)


if __name__ == "__main__":
    cli()
