"""Tests for mood forecasting."""

from datetime import date, datetime, timedelta
from types import SimpleNamespace

import pytest

from journal.forecast import (
    FORECAST_DAYS,
    RECOMMENDATIONS,
    ForecastResult,
    classify_score,
    classify_trend,
    compute_forecast,
    daily_aggregates,
    linear_regression,
    moving_average,
)
from shared_types import MoodTrend, SentimentLabel


def _daily(now: datetime, scores: list, hour: int = 12) -> list[dict]:
    """One entry per day, the last one on ``now``'s date."""
    n = len(scores)
    return [
        {
            "created": (now - timedelta(days=n - 1 - i)).replace(hour=hour).isoformat(),
            "score": s,
        }
        for i, s in enumerate(scores)
    ]


def _trend_component(point) -> float:
    return point.score - (0.05 if point.date.weekday() >= 5 else 0.0)


class TestHelpers:
    """Pure numeric helpers."""

    def test_moving_average_trailing_window(self):
        assert moving_average([1.0, 2.0, 3.0, 4.0], 3) == pytest.approx([1.0, 1.5, 2.0, 3.0])

    def test_moving_average_same_length(self):
        values = [0.1, -0.2, 0.3, 0.0, 0.5]
        assert len(moving_average(values, 3)) == len(values)

    def test_linear_regression_exact_line(self):
        slope, intercept = linear_regression([1.0, 3.0, 5.0, 7.0])
        assert slope == pytest.approx(2.0)
        assert intercept == pytest.approx(1.0)

    def test_linear_regression_flat(self):
        slope, intercept = linear_regression([0.0, 0.0, 0.0])
        assert slope == 0.0
        assert intercept == 0.0

    @pytest.mark.parametrize(
        "score,label",
        [
            (0.11, SentimentLabel.POSITIVE),
            (0.1, SentimentLabel.NEUTRAL),
            (0.0, SentimentLabel.NEUTRAL),
            (-0.1, SentimentLabel.NEUTRAL),
            (-0.11, SentimentLabel.NEGATIVE),
        ],
    )
    def test_classify_score_thresholds(self, score, label):
        assert classify_score(score) == label

    def test_classify_trend_thresholds(self):
        assert classify_trend(0.021) == MoodTrend.IMPROVING
        assert classify_trend(0.02) == MoodTrend.STABLE
        assert classify_trend(-0.02) == MoodTrend.STABLE
        assert classify_trend(-0.021) == MoodTrend.DECLINING

    def test_daily_aggregates_mean_per_day(self):
        scored = [
            (datetime(2024, 3, 1, 9), 0.2),
            (datetime(2024, 3, 1, 21), 0.6),
            (datetime(2024, 2, 28, 12), -0.4),
        ]
        aggs = daily_aggregates(scored)
        assert [a.date for a in aggs] == [date(2024, 2, 28), date(2024, 3, 1)]
        assert aggs[1].average_score == pytest.approx(0.4)
        assert aggs[1].sentiment == SentimentLabel.POSITIVE
        assert aggs[0].sentiment == SentimentLabel.NEGATIVE


class TestGating:
    """Insufficient data is a result, not an exception."""

    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_too_few_entries(self, fixed_now, count):
        result = compute_forecast(_daily(fixed_now, [0.5] * count), now=fixed_now)
        assert result.has_enough_data is False
        assert result.forecast == ()
        assert result.historical == ()
        assert result.trend is None

    def test_three_entries_three_days(self, fixed_now):
        result = compute_forecast(_daily(fixed_now, [0.1, 0.2, 0.3]), now=fixed_now)
        assert result.has_enough_data is True
        assert len(result.forecast) == FORECAST_DAYS

    def test_three_entries_same_day(self, fixed_now):
        entries = [
            {"created": fixed_now.replace(hour=h).isoformat(), "score": 0.3} for h in (8, 12, 18)
        ]
        result = compute_forecast(entries, now=fixed_now)
        assert result.has_enough_data is False

    def test_null_scores_ignored(self, fixed_now):
        entries = _daily(fixed_now, [0.1, None, None, 0.2])
        result = compute_forecast(entries, now=fixed_now)
        assert result.has_enough_data is False

    def test_entries_outside_window_ignored(self, fixed_now):
        old = _daily(fixed_now - timedelta(days=40), [0.1, 0.2, 0.3])
        recent = _daily(fixed_now, [0.4, 0.5])
        result = compute_forecast(old + recent, now=fixed_now)
        assert result.has_enough_data is False

    def test_custom_lookback(self, fixed_now):
        entries = _daily(fixed_now, [0.1, 0.2, 0.3, 0.4, 0.5])
        assert compute_forecast(entries, now=fixed_now, lookback_days=2).has_enough_data is False
        assert compute_forecast(entries, now=fixed_now, lookback_days=10).has_enough_data is True


class TestForecastShape:
    """Invariants that hold for every produced forecast."""

    def test_dates_follow_last_historical_day(self, fixed_now):
        entries = _daily(fixed_now, [0.1, -0.3, 0.2, 0.0])
        result = compute_forecast(entries, now=fixed_now)

        last = result.historical[-1].date
        assert [p.date for p in result.forecast] == [
            last + timedelta(days=k) for k in range(1, FORECAST_DAYS + 1)
        ]
        assert all(p.is_historical for p in result.historical)
        assert not any(p.is_historical for p in result.forecast)

    def test_historical_uses_raw_daily_averages(self, fixed_now):
        scores = [0.9, -0.9, 0.9, -0.9]
        result = compute_forecast(_daily(fixed_now, scores), now=fixed_now)
        assert [p.score for p in result.historical] == pytest.approx(scores)

    def test_scores_clamped(self, fixed_now):
        result = compute_forecast(_daily(fixed_now, [0.2, 0.6, 1.0]), now=fixed_now)
        for point in result.historical + result.forecast:
            assert -1.0 <= point.score <= 1.0
        assert max(p.score for p in result.forecast) == 1.0

    def test_labels_match_scores(self, fixed_now):
        entries = _daily(fixed_now, [0.5, 0.05, -0.4, 0.15, -0.12, 0.0])
        result = compute_forecast(entries, now=fixed_now)
        for point in result.historical + result.forecast:
            assert point.sentiment == classify_score(point.score)

    def test_confidence_lower_bound(self, fixed_now):
        result = compute_forecast(_daily(fixed_now, [-1.0, 1.0, -1.0, 1.0]), now=fixed_now)
        assert result.confidence == 0.3

    def test_deterministic(self, fixed_now):
        entries = _daily(fixed_now, [0.1, -0.3, 0.2, 0.4, -0.1, 0.25])
        first = compute_forecast(entries, now=fixed_now)
        second = compute_forecast(entries, now=fixed_now)
        assert first == second
        assert [p.score for p in first.forecast] == [p.score for p in second.forecast]

    def test_accepts_objects_and_datetimes(self, fixed_now):
        entries = [
            SimpleNamespace(created_at=fixed_now - timedelta(days=d), score=0.2, sentiment="x")
            for d in range(3)
        ]
        result = compute_forecast(entries, now=fixed_now)
        assert result.has_enough_data is True

    def test_weekend_bonus(self, fixed_now):
        # fixed_now is a Wednesday: forecast runs Thu, Fri, Sat, Sun, Mon
        result = compute_forecast(_daily(fixed_now, [0.0] * 5), now=fixed_now)
        weekend = [p for p in result.forecast if p.date.weekday() >= 5]
        weekdays = [p for p in result.forecast if p.date.weekday() < 5]
        assert len(weekend) == 2
        assert all(p.score == pytest.approx(0.05) for p in weekend)
        assert all(p.score == pytest.approx(0.0) for p in weekdays)

    def test_to_dict(self, fixed_now):
        data = compute_forecast(_daily(fixed_now, [0.1, 0.2, 0.3]), now=fixed_now).to_dict()
        assert data["has_enough_data"] is True
        assert len(data["forecast"]) == 5
        assert data["forecast"][0]["date"] == "2024-03-14"
        assert data["trend"] == "improving"

    def test_insufficient_to_dict(self):
        data = ForecastResult.insufficient().to_dict()
        assert data == {
            "has_enough_data": False,
            "historical": [],
            "forecast": [],
            "confidence": None,
            "trend": None,
            "recommendation": None,
        }


class TestScenarios:
    """End-to-end scenarios."""

    def test_linear_improvement(self, fixed_now):
        scores = [round(-0.5 + 0.1 * i, 1) for i in range(10)]
        result = compute_forecast(_daily(fixed_now, scores), now=fixed_now)

        assert result.trend == MoodTrend.IMPROVING
        components = [_trend_component(p) for p in result.forecast]
        assert all(b > a for a, b in zip(components, components[1:]))
        assert result.recommendation == RECOMMENDATIONS[MoodTrend.IMPROVING]

    def test_linear_decline(self, fixed_now):
        scores = [round(0.4 - 0.1 * i, 1) for i in range(10)]
        result = compute_forecast(_daily(fixed_now, scores), now=fixed_now)

        assert result.trend == MoodTrend.DECLINING
        assert result.recommendation == RECOMMENDATIONS[MoodTrend.DECLINING]

    def test_flat_zero(self, fixed_now):
        result = compute_forecast(_daily(fixed_now, [0.0] * 5), now=fixed_now)

        assert result.confidence == 0.9
        assert result.trend == MoodTrend.STABLE
        assert result.recommendation == RECOMMENDATIONS[MoodTrend.STABLE]
        for point in result.historical + result.forecast:
            assert point.sentiment == SentimentLabel.NEUTRAL

    def test_stable_but_high_uses_improving_message(self, fixed_now):
        result = compute_forecast(_daily(fixed_now, [0.5] * 4), now=fixed_now)
        assert result.trend == MoodTrend.STABLE
        assert result.recommendation == RECOMMENDATIONS[MoodTrend.IMPROVING]

    def test_stable_but_low_uses_declining_message(self, fixed_now):
        result = compute_forecast(_daily(fixed_now, [-0.5] * 4), now=fixed_now)
        assert result.trend == MoodTrend.STABLE
        assert result.recommendation == RECOMMENDATIONS[MoodTrend.DECLINING]
