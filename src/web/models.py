"""Pydantic request/response schemas for the web API."""

from typing import Optional

from pydantic import BaseModel, Field

# --- Journal ---


class JournalCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=100_000)
    entry_type: str = "daily"
    title: Optional[str] = None
    tags: Optional[list[str]] = None


class JournalEntry(BaseModel):
    filename: str
    title: str
    type: str
    created: Optional[str] = None
    tags: list[str] = []
    score: Optional[float] = None
    sentiment: Optional[str] = None
    emotions: list[str] = []
    preview: str = ""
    content: Optional[str] = None
    coping_strategy: Optional[str] = None


# --- Trends ---


class MoodPoint(BaseModel):
    date: str
    score: float
    label: str
    title: str = ""


class ForecastPointOut(BaseModel):
    date: str
    score: float
    sentiment: str
    is_historical: bool


class ForecastResponse(BaseModel):
    has_enough_data: bool
    historical: list[ForecastPointOut] = []
    forecast: list[ForecastPointOut] = []
    confidence: Optional[float] = None
    trend: Optional[str] = None
    recommendation: Optional[str] = None


# --- Stats ---


class SummaryStats(BaseModel):
    total_entries: int
    this_week: int
    average_score: float
    average_label: str
    positive_entries: int


class StreakResponse(BaseModel):
    current_streak: int
    longest_streak: int
    last_entry_date: Optional[str] = None
    badge_level: Optional[str] = None


class EmotionInsights(BaseModel):
    total_entries: int
    most_common: list[tuple[str, int]] = []
    recent_trend: list[tuple[str, int]] = []
