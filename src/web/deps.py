"""Dependency injection for FastAPI routes."""

from functools import lru_cache
from typing import Optional

import structlog

from cli.config import load_config
from cli.config_models import JournalConfig
from journal.remote_sentiment import HuggingFaceSentimentClient
from journal.storage import JournalStorage

logger = structlog.get_logger()


@lru_cache
def get_config() -> JournalConfig:
    """Load shared config (config.yaml or defaults)."""
    return load_config()


def get_storage() -> JournalStorage:
    return JournalStorage(get_config().paths.journal_dir)


def get_remote_sentiment() -> Optional[HuggingFaceSentimentClient]:
    """Remote classifier when the config selects it, else None (lexicon)."""
    sentiment = get_config().sentiment
    if sentiment.provider != "huggingface":
        return None
    return HuggingFaceSentimentClient(api_key=sentiment.api_key, model=sentiment.model)


def get_lookback_days() -> int:
    return get_config().forecast.lookback_days


def get_score_scale() -> str:
    """Scale of scores already stored in frontmatter ("signed" or "unit")."""
    return get_config().sentiment.score_scale
