"""Keyword emotion detection and coping strategy suggestions."""

import random
from typing import Optional

from shared_types import Emotion, SentimentLabel

EMOTION_KEYWORDS: dict[Emotion, tuple[str, ...]] = {
    Emotion.STRESS: ("stressed", "overwhelmed", "pressure", "deadline", "busy", "exhausted"),
    Emotion.ANXIETY: ("anxious", "worried", "nervous", "panic", "afraid", "scared"),
    Emotion.SADNESS: ("sad", "depressed", "lonely", "hurt", "disappointed", "upset"),
    Emotion.ANGER: ("angry", "frustrated", "mad", "irritated", "annoyed", "furious"),
    Emotion.JOY: ("happy", "excited", "joyful", "thrilled", "delighted", "amazing"),
    Emotion.FEAR: ("fear", "terrified", "frightened", "phobia", "dread", "horror"),
}

COPING_STRATEGIES: dict[Emotion, tuple[str, ...]] = {
    Emotion.STRESS: (
        "Try the 4-7-8 breathing technique: inhale for 4, hold for 7, exhale for 8",
        "Take a 5-minute walk outside to clear your mind",
        "Practice progressive muscle relaxation",
        "Write down 3 things you're grateful for today",
    ),
    Emotion.ANXIETY: (
        "Ground yourself with 5-4-3-2-1: five things you see, four you hear, "
        "three you touch, two you smell, one you taste",
        "Practice deep belly breathing for 2 minutes",
        "Try mindful meditation for 10 minutes",
        "Challenge negative thoughts with positive affirmations",
    ),
    Emotion.SADNESS: (
        "Reach out to a trusted friend or family member",
        "Engage in a hobby you enjoy",
        "Listen to uplifting music or watch a funny video",
        "Practice self-compassion and gentle self-talk",
    ),
    Emotion.ANGER: (
        "Count to 10 slowly before responding",
        "Physical exercise like jogging or yoga can help release tension",
        "Practice STOP: stop, take a breath, observe, proceed mindfully",
        "Express your feelings through journaling or art",
    ),
    Emotion.JOY: (
        "Share your happiness with someone you care about",
        "Take a moment to savor this positive feeling",
        "Consider what led to this joy and how to recreate it",
        "Practice gratitude by writing down what you're thankful for",
    ),
    Emotion.FEAR: (
        "Break down your fear into smaller, manageable parts",
        "Practice visualization of positive outcomes",
        "Use grounding techniques to stay present",
        "Remind yourself of past challenges you've overcome",
    ),
}


def detect_emotions(text: str, sentiment_label: Optional[str] = None) -> list[str]:
    """Detect emotions by keyword, falling back to the sentiment label.

    Substring matching, so "stressed" also matches "unstressed".
    """
    lower = text.lower()
    detected = [
        str(emotion)
        for emotion, keywords in EMOTION_KEYWORDS.items()
        if any(k in lower for k in keywords)
    ]
    if detected:
        return detected

    if sentiment_label == SentimentLabel.POSITIVE:
        return [str(Emotion.JOY)]
    if sentiment_label == SentimentLabel.NEGATIVE:
        return [str(Emotion.SADNESS)]
    return [str(Emotion.NEUTRAL)]


def coping_strategy(emotions: list[str], rng: Optional[random.Random] = None) -> Optional[str]:
    """Pick one strategy for the first emotion that has any."""
    rng = rng or random.Random()
    for emotion in emotions:
        strategies = COPING_STRATEGIES.get(emotion)
        if strategies:
            return rng.choice(strategies)
    return None
