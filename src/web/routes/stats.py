"""Dashboard stats, streak and emotion insight routes."""

from datetime import date

from fastapi import APIRouter, Depends

from journal.forecast import to_local_datetime
from journal.stats import emotion_insights, summary_stats
from journal.storage import JournalStorage
from journal.streaks import compute_streak
from web.deps import get_score_scale, get_storage
from web.models import EmotionInsights, StreakResponse, SummaryStats

router = APIRouter(prefix="/api/stats", tags=["stats"])

MAX_ENTRIES = 1000


@router.get("", response_model=SummaryStats)
async def get_summary(
    storage: JournalStorage = Depends(get_storage),
    scale: str = Depends(get_score_scale),
):
    return summary_stats(storage.list_entries(limit=MAX_ENTRIES), scale=scale)


@router.get("/streak", response_model=StreakResponse)
async def get_streak(storage: JournalStorage = Depends(get_storage)):
    entries = storage.list_entries(limit=MAX_ENTRIES)
    days = [
        dt.date() for dt in (to_local_datetime(e.get("created")) for e in entries) if dt is not None
    ]
    return compute_streak(days, date.today()).to_dict()


@router.get("/emotions", response_model=EmotionInsights)
async def get_emotions(top: int = 3, storage: JournalStorage = Depends(get_storage)):
    return emotion_insights(storage.list_entries(limit=MAX_ENTRIES), top=top)
