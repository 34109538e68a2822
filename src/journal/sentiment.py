"""Keyword-based sentiment analysis and score normalization for journal entries."""

import re
from datetime import datetime, timedelta
from typing import Optional

import structlog

from .forecast import classify_score

logger = structlog.get_logger()

# Lexicon-based sentiment (no model download needed)
_POSITIVE = {
    "great", "good", "excellent", "happy", "excited", "proud", "accomplished",
    "progress", "success", "win", "awesome", "fantastic", "love", "enjoy",
    "productive", "motivated", "inspired", "grateful", "thankful", "confident",
    "calm", "peaceful", "relaxed", "hopeful", "joyful", "delighted", "amazing",
    "satisfied", "fun", "rewarding", "thriving", "rested", "content", "cheerful",
}

_NEGATIVE = {
    "bad", "terrible", "frustrated", "stuck", "stressed", "anxious", "sad",
    "overwhelmed", "exhausted", "burned", "burnout", "failed", "struggling",
    "confused", "worried", "disappointed", "tired", "difficult", "hard",
    "lonely", "lost", "hurt", "upset", "depressed", "drained", "nervous",
    "angry", "annoyed", "scared", "painful", "hopeless", "afraid", "miserable",
}

SCORE_SCALES = ("signed", "unit")


def analyze_sentiment(text: str) -> dict:
    """Analyze sentiment of text using keyword matching.

    Returns:
        {score: float (-1 to 1), label: str, positive_count: int, negative_count: int}
    """
    words = set(re.findall(r"\b[a-z]+\b", text.lower()))
    pos = len(words & _POSITIVE)
    neg = len(words & _NEGATIVE)
    total = pos + neg

    score = 0.0 if total == 0 else (pos - neg) / total

    return {
        "score": round(score, 2),
        "label": str(classify_score(score)),
        "positive_count": pos,
        "negative_count": neg,
    }


def normalize_score(score: Optional[float], scale: str = "signed") -> Optional[float]:
    """Bring a score onto the signed -1..1 scale used for mood tracking.

    Args:
        score: Raw score or None
        scale: "signed" (already -1..1) or "unit" (0..1)

    Raises:
        ValueError: If scale is unknown
    """
    if scale not in SCORE_SCALES:
        raise ValueError(f"Unknown score scale '{scale}'. Must be one of {SCORE_SCALES}")
    if score is None:
        return None
    score = float(score)
    if scale == "unit":
        score = 2 * score - 1
    return max(-1.0, min(1.0, score))


def score_from_classifier(label: str, confidence: float) -> float:
    """Map a POSITIVE/NEGATIVE classifier verdict with 0..1 confidence onto -1..1."""
    label = (label or "").upper()
    confidence = max(0.0, min(1.0, float(confidence)))
    if label == "POSITIVE":
        return confidence
    if label == "NEGATIVE":
        return -confidence
    return 0.0


def stored_sentiment(entry: dict, scale: str = "signed") -> Optional[dict]:
    """Frontmatter score on the signed scale, with its label. None if unscored.

    Entries written by this app record their own `score_scale`; `scale` applies
    only to entries without one (imported data).
    """
    if entry.get("score") is None:
        return None
    entry_scale = entry.get("score_scale") or scale
    score = normalize_score(entry["score"], entry_scale)
    if entry_scale == "signed" and entry.get("sentiment"):
        return {"score": score, "label": entry["sentiment"]}
    return {"score": score, "label": str(classify_score(score))}


def _entry_sentiment(journal_storage, entry: dict, scale: str = "signed") -> dict:
    """Stored frontmatter score if present, else lexicon analysis of the content."""
    stored = stored_sentiment(entry, scale)
    if stored is not None:
        return stored
    post = journal_storage.read(entry["path"])
    return analyze_sentiment(post.content)


def get_mood_history(
    journal_storage,
    days: int = 30,
    now: Optional[datetime] = None,
    scale: str = "signed",
) -> list[dict]:
    """Get mood timeline from journal entries.

    Stored scores are read on the given scale and reported on -1..1.

    Returns list of {date, score, label, title} sorted by date.
    """
    now = now or datetime.now()
    cutoff = (now - timedelta(days=days)).isoformat()
    entries = journal_storage.list_entries(limit=500)

    timeline = []
    for entry in entries:
        created = entry.get("created") or ""
        if created < cutoff:
            continue

        try:
            sentiment = _entry_sentiment(journal_storage, entry, scale)
        except (OSError, ValueError) as e:
            logger.warning("sentiment.entry_skipped", path=str(entry.get("path")), error=str(e))
            continue
        timeline.append({
            "date": created[:10],
            "score": sentiment.get("score", 0.0),
            "label": sentiment.get("label", "neutral"),
            "title": entry.get("title", ""),
        })

    timeline.sort(key=lambda x: x["date"])
    return timeline


def scored_entries(journal_storage, limit: int = 500, scale: str = "signed") -> list[dict]:
    """Entries as {created, score, sentiment} ready for forecasting.

    Entries without a stored score are scored with the lexicon.
    """
    result = []
    for entry in journal_storage.list_entries(limit=limit):
        if not entry.get("created"):
            continue
        try:
            sentiment = _entry_sentiment(journal_storage, entry, scale)
        except (OSError, ValueError) as e:
            logger.warning("sentiment.entry_skipped", path=str(entry.get("path")), error=str(e))
            continue
        result.append({
            "created": entry["created"],
            "score": sentiment["score"],
            "sentiment": sentiment["label"],
        })
    return result
