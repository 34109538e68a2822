"""Dashboard summary stats and emotion insights."""

from collections import Counter
from datetime import datetime, timedelta
from typing import Optional

from shared_types import SentimentLabel

from .forecast import classify_score, to_local_datetime
from .sentiment import stored_sentiment


def summary_stats(
    entries: list[dict],
    now: Optional[datetime] = None,
    scale: str = "signed",
) -> dict:
    """Headline numbers for a set of entries.

    Args:
        entries: Entry dicts as returned by JournalStorage.list_entries
        now: Reference time for the "this week" count
        scale: Scale of stored scores that do not record their own

    Returns:
        {total_entries, this_week, average_score, average_label, positive_entries}
    """
    now = now or datetime.now()
    week_ago = now - timedelta(days=7)

    this_week = 0
    for entry in entries:
        created = to_local_datetime(entry.get("created"))
        if created is not None and created > week_ago:
            this_week += 1

    scored = [s for s in (stored_sentiment(e, scale) for e in entries) if s is not None]
    scores = [s["score"] for s in scored]
    positive = sum(1 for score in scores if classify_score(score) == SentimentLabel.POSITIVE)
    average = sum(scores) / len(scores) if scores else 0.0

    return {
        "total_entries": len(entries),
        "this_week": this_week,
        "average_score": round(average, 3),
        "average_label": str(classify_score(average)),
        "positive_entries": positive,
    }


def emotion_insights(entries: list[dict], top: int = 3, recent: int = 10) -> dict:
    """Most common emotions overall and across the most recent entries.

    Entries are expected newest first.
    """
    overall = Counter(em for e in entries for em in (e.get("emotions") or []))
    latest = Counter(em for e in entries[:recent] for em in (e.get("emotions") or []))
    return {
        "total_entries": len(entries),
        "most_common": overall.most_common(top),
        "recent_trend": latest.most_common(2),
    }
