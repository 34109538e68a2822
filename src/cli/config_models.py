"""Pydantic configuration models for Mood Journal."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

VALID_SENTIMENT_PROVIDERS = {"lexicon", "huggingface"}
VALID_SCORE_SCALES = {"signed", "unit"}
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class PathsConfig(BaseModel):
    """File paths configuration."""

    journal_dir: Path = Path("~/moodjournal/journal")
    log_file: Path = Path("~/moodjournal/moodjournal.log")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.journal_dir = self.journal_dir.expanduser()
        self.log_file = self.log_file.expanduser()
        return self


class SentimentConfig(BaseModel):
    """Sentiment analysis configuration."""

    provider: str = "lexicon"
    model: str = "distilbert-base-uncased-finetuned-sst-2-english"
    api_key: Optional[str] = None
    # Scale of scores already stored in imported data
    score_scale: str = "signed"

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        if v not in VALID_SENTIMENT_PROVIDERS:
            raise ValueError(
                f"Invalid sentiment provider: {v}. Must be one of {VALID_SENTIMENT_PROVIDERS}"
            )
        return v

    @field_validator("score_scale")
    @classmethod
    def validate_scale(cls, v: str) -> str:
        if v not in VALID_SCORE_SCALES:
            raise ValueError(f"Invalid score scale: {v}. Must be one of {VALID_SCORE_SCALES}")
        return v


class ForecastConfig(BaseModel):
    """Mood forecast configuration."""

    lookback_days: int = 30

    @field_validator("lookback_days")
    @classmethod
    def validate_lookback(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"lookback_days must be >= 1, got {v}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file_level: str = "DEBUG"
    json_mode: bool = False

    @field_validator("level", "file_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class JournalConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    sentiment: SentimentConfig = Field(default_factory=SentimentConfig)
    forecast: ForecastConfig = Field(default_factory=ForecastConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def expand_env_vars(self):
        """Expand ${VAR} patterns in API keys."""
        key = self.sentiment.api_key
        if key and key.startswith("${") and key.endswith("}"):
            self.sentiment.api_key = os.getenv(key[2:-1], "")
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "JournalConfig":
        """Create config from a parsed YAML dict."""
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
