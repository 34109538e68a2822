"""Shared CLI utilities."""

import sys

import structlog
from rich.console import Console

console = Console()
logger = structlog.get_logger()


def get_components(with_remote: bool = False) -> dict:
    """Initialize components from config.

    Args:
        with_remote: Also build the remote sentiment client when the config selects it
    """
    from cli.config import load_config
    from journal import JournalStorage
    from journal.remote_sentiment import HuggingFaceSentimentClient

    try:
        config = load_config()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    storage = JournalStorage(config.paths.journal_dir)

    remote = None
    if with_remote and config.sentiment.provider == "huggingface":
        remote = HuggingFaceSentimentClient(
            api_key=config.sentiment.api_key,
            model=config.sentiment.model,
        )

    return {
        "config": config,
        "storage": storage,
        "remote": remote,
    }
