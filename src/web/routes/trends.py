"""Mood timeline + forecast routes."""

import structlog
from fastapi import APIRouter, Depends

from journal.forecast import compute_forecast
from journal.sentiment import get_mood_history, scored_entries
from journal.storage import JournalStorage
from web.deps import get_lookback_days, get_score_scale, get_storage
from web.models import ForecastResponse, MoodPoint

logger = structlog.get_logger()

router = APIRouter(prefix="/api/trends", tags=["trends"])


@router.get("/mood", response_model=list[MoodPoint])
async def get_mood(
    days: int = 30,
    storage: JournalStorage = Depends(get_storage),
    scale: str = Depends(get_score_scale),
):
    """Mood timeline from journal sentiment analysis."""
    return get_mood_history(storage, days=days, scale=scale)


@router.get("/forecast", response_model=ForecastResponse)
async def get_forecast(
    storage: JournalStorage = Depends(get_storage),
    lookback_days: int = Depends(get_lookback_days),
    scale: str = Depends(get_score_scale),
):
    """Five-day mood forecast; has_enough_data=false prompts the user to keep journaling."""
    result = compute_forecast(scored_entries(storage, scale=scale), lookback_days=lookback_days)
    if not result.has_enough_data:
        logger.info("trends.forecast_insufficient_data")
    return result.to_dict()
