"""Tests for dashboard stats."""

from datetime import timedelta

from journal.stats import emotion_insights, summary_stats


class TestSummaryStats:
    def test_empty(self, fixed_now):
        stats = summary_stats([], now=fixed_now)
        assert stats == {
            "total_entries": 0,
            "this_week": 0,
            "average_score": 0.0,
            "average_label": "neutral",
            "positive_entries": 0,
        }

    def test_counts(self, fixed_now):
        entries = [
            {"created": fixed_now.isoformat(), "score": 0.6, "sentiment": "positive"},
            {"created": (fixed_now - timedelta(days=3)).isoformat(), "score": 0.2, "sentiment": "positive"},
            {"created": (fixed_now - timedelta(days=10)).isoformat(), "score": -0.2, "sentiment": "negative"},
            {"created": (fixed_now - timedelta(days=12)).isoformat(), "score": None},
        ]
        stats = summary_stats(entries, now=fixed_now)
        assert stats["total_entries"] == 4
        assert stats["this_week"] == 2
        assert stats["average_score"] == 0.2
        assert stats["average_label"] == "positive"
        assert stats["positive_entries"] == 2

    def test_from_storage(self, populated_journal, fixed_now):
        entries = populated_journal["storage"].list_entries()
        stats = summary_stats(entries, now=fixed_now)
        assert stats["total_entries"] == 3
        assert stats["this_week"] == 3
        assert stats["average_score"] == 0.2


class TestEmotionInsights:
    def test_most_common(self):
        entries = [
            {"emotions": ["joy"]},
            {"emotions": ["stress", "anxiety"]},
            {"emotions": ["stress"]},
            {"emotions": None},
            {},
        ]
        insights = emotion_insights(entries, top=2)
        assert insights["total_entries"] == 5
        assert insights["most_common"] == [("stress", 2), ("joy", 1)]

    def test_recent_window(self):
        entries = [{"emotions": ["joy"]}] * 3 + [{"emotions": ["sadness"]}] * 10
        insights = emotion_insights(entries, recent=3)
        assert insights["recent_trend"] == [("joy", 3)]
        assert insights["most_common"][0] == ("sadness", 10)


class TestSummaryStatsScale:
    def test_unit_scale_scores_normalized(self, fixed_now):
        entries = [
            {"created": (fixed_now - timedelta(days=d)).isoformat(), "score": 0.2, "sentiment": "positive"}
            for d in range(3)
        ]
        stats = summary_stats(entries, now=fixed_now, scale="unit")
        assert stats["average_score"] == -0.6
        assert stats["average_label"] == "negative"
        assert stats["positive_entries"] == 0

    def test_entry_scale_overrides_config(self, fixed_now):
        entries = [
            {"created": fixed_now.isoformat(), "score": 0.5, "score_scale": "signed"},
            {"created": fixed_now.isoformat(), "score": 0.75},
        ]
        stats = summary_stats(entries, now=fixed_now, scale="unit")
        assert stats["average_score"] == 0.5
        assert stats["positive_entries"] == 2
