"""Shared enums and types for mood-journal."""

from enum import StrEnum


class EntryType(StrEnum):
    DAILY = "daily"
    REFLECTION = "reflection"
    GRATITUDE = "gratitude"
    NOTE = "note"


class SentimentLabel(StrEnum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class MoodTrend(StrEnum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class BadgeLevel(StrEnum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"


class Emotion(StrEnum):
    JOY = "joy"
    STRESS = "stress"
    ANXIETY = "anxiety"
    SADNESS = "sadness"
    ANGER = "anger"
    FEAR = "fear"
    NEUTRAL = "neutral"
