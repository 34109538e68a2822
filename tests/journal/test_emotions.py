"""Tests for emotion detection and coping strategies."""

import random

from journal.emotions import COPING_STRATEGIES, coping_strategy, detect_emotions


class TestDetectEmotions:
    def test_keyword_match(self):
        assert detect_emotions("I'm so stressed about this deadline") == ["stress"]

    def test_multiple_in_fixed_order(self):
        emotions = detect_emotions("Happy about the launch but worried and frustrated")
        assert emotions == ["anxiety", "anger", "joy"]

    def test_fallback_positive(self):
        assert detect_emotions("A calm afternoon", "positive") == ["joy"]

    def test_fallback_negative(self):
        assert detect_emotions("Nothing went right", "negative") == ["sadness"]

    def test_fallback_neutral(self):
        assert detect_emotions("Groceries and laundry") == ["neutral"]


class TestCopingStrategy:
    def test_picks_from_first_emotion(self):
        tip = coping_strategy(["anger", "joy"], rng=random.Random(1))
        assert tip in COPING_STRATEGIES["anger"]

    def test_skips_emotions_without_strategies(self):
        tip = coping_strategy(["neutral", "fear"], rng=random.Random(0))
        assert tip in COPING_STRATEGIES["fear"]

    def test_none_when_nothing_matches(self):
        assert coping_strategy(["neutral"]) is None
        assert coping_strategy([]) is None

    def test_deterministic_with_seed(self):
        a = coping_strategy(["stress"], rng=random.Random(42))
        b = coping_strategy(["stress"], rng=random.Random(42))
        assert a == b
