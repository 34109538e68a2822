"""Short-horizon mood forecasting from scored journal entries."""

from collections import defaultdict
from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Optional

import numpy as np
import structlog

from shared_types import MoodTrend, SentimentLabel

logger = structlog.get_logger()

LOOKBACK_DAYS = 30
MIN_DATA_POINTS = 3
FORECAST_DAYS = 5
SMOOTHING_WINDOW = 3

TREND_WEIGHT = 0.7
LEVEL_WEIGHT = 0.3
WEEKEND_BONUS = 0.05

LABEL_THRESHOLD = 0.1
TREND_THRESHOLD = 0.02
RECOMMENDATION_THRESHOLD = 0.2
MIN_CONFIDENCE = 0.3
MAX_CONFIDENCE = 0.9

RECOMMENDATIONS = {
    MoodTrend.DECLINING: (
        "Your mood may dip in the coming days. Consider scheduling uplifting activities, "
        "connecting with friends, or practicing self-care."
    ),
    MoodTrend.IMPROVING: (
        "You're trending toward better moods! Keep up your positive habits and consider "
        "planning enjoyable activities."
    ),
    MoodTrend.STABLE: (
        "Your mood appears stable. This is a good time to maintain your current routines "
        "and perhaps try something new."
    ),
}


@dataclass(frozen=True)
class DailyAggregate:
    """Mean score of all entries written on one calendar day."""

    date: date
    average_score: float
    sentiment: SentimentLabel


@dataclass(frozen=True)
class ForecastPoint:
    date: date
    score: float
    sentiment: SentimentLabel
    is_historical: bool


@dataclass(frozen=True)
class ForecastResult:
    """Forecast output. ``has_enough_data`` False means nothing was projected."""

    has_enough_data: bool
    historical: tuple[ForecastPoint, ...] = field(default_factory=tuple)
    forecast: tuple[ForecastPoint, ...] = field(default_factory=tuple)
    confidence: Optional[float] = None
    trend: Optional[MoodTrend] = None
    recommendation: Optional[str] = None

    @classmethod
    def insufficient(cls) -> "ForecastResult":
        return cls(has_enough_data=False)

    def to_dict(self) -> dict:
        data = asdict(self)
        for key in ("historical", "forecast"):
            data[key] = [
                {**point, "date": point["date"].isoformat()} for point in data[key]
            ]
        return data


def classify_score(score: float) -> SentimentLabel:
    """Label a signed score: >0.1 positive, <-0.1 negative, else neutral."""
    if score > LABEL_THRESHOLD:
        return SentimentLabel.POSITIVE
    if score < -LABEL_THRESHOLD:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def classify_trend(slope: float) -> MoodTrend:
    if slope > TREND_THRESHOLD:
        return MoodTrend.IMPROVING
    if slope < -TREND_THRESHOLD:
        return MoodTrend.DECLINING
    return MoodTrend.STABLE


def moving_average(values: list[float], window: int) -> list[float]:
    """Trailing simple moving average; output has the same length as input."""
    result = []
    for i in range(len(values)):
        start = max(0, i - window + 1)
        subset = values[start : i + 1]
        result.append(sum(subset) / len(subset))
    return result


def linear_regression(y: list[float]) -> tuple[float, float]:
    """Closed-form OLS fit of ``y`` against its 0-based index.

    Returns:
        (slope, intercept)
    """
    n = len(y)
    xs = np.arange(n, dtype=float)
    ys = np.array(y, dtype=float)
    sum_x = xs.sum()
    sum_y = ys.sum()
    sum_xy = (xs * ys).sum()
    sum_xx = (xs * xs).sum()

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    return float(slope), float(intercept)


def _field(entry: Any, *names: str) -> Any:
    for name in names:
        if isinstance(entry, dict):
            if name in entry:
                return entry[name]
        elif hasattr(entry, name):
            return getattr(entry, name)
    return None


def to_local_datetime(value: Any) -> Optional[datetime]:
    """Coerce a datetime or ISO string to a naive local datetime."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime.combine(value, datetime.min.time())
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


def _scored_in_window(entries: Iterable[Any], cutoff: datetime) -> list[tuple[datetime, float]]:
    result = []
    for entry in entries:
        score = _field(entry, "score")
        if score is None:
            continue
        created = to_local_datetime(_field(entry, "created", "created_at"))
        if created is None or created < cutoff:
            continue
        result.append((created, float(score)))
    return result


def daily_aggregates(scored: list[tuple[datetime, float]]) -> list[DailyAggregate]:
    """Group (created, score) pairs by local calendar day, ascending by date.

    Days with no entries are not filled in.
    """
    by_day: dict[date, list[float]] = defaultdict(list)
    for created, score in scored:
        by_day[created.date()].append(score)

    aggregates = []
    for day in sorted(by_day):
        scores = by_day[day]
        average = sum(scores) / len(scores)
        aggregates.append(DailyAggregate(day, average, classify_score(average)))
    return aggregates


def _recommend(trend: MoodTrend, mean_forecast: float) -> str:
    if trend == MoodTrend.DECLINING or mean_forecast < -RECOMMENDATION_THRESHOLD:
        return RECOMMENDATIONS[MoodTrend.DECLINING]
    if trend == MoodTrend.IMPROVING or mean_forecast > RECOMMENDATION_THRESHOLD:
        return RECOMMENDATIONS[MoodTrend.IMPROVING]
    return RECOMMENDATIONS[MoodTrend.STABLE]


def compute_forecast(
    entries: Iterable[Any],
    now: Optional[datetime] = None,
    lookback_days: int = LOOKBACK_DAYS,
) -> ForecastResult:
    """Forecast the next five days of mood from recent scored entries.

    Args:
        entries: Dicts or objects with ``created``/``created_at`` (datetime or
            ISO string) and ``score`` (signed -1..1 or None). Other fields ignored.
        now: Reference time; defaults to the current local time.
        lookback_days: Size of the window, counted back from ``now``.

    Returns:
        ForecastResult; ``has_enough_data`` is False when fewer than three
        scored entries or three distinct days fall inside the window.
    """
    now = to_local_datetime(now) if now is not None else datetime.now()
    cutoff = now - timedelta(days=lookback_days)

    scored = _scored_in_window(entries, cutoff)
    if len(scored) < MIN_DATA_POINTS:
        logger.debug("forecast.insufficient_data", scored_entries=len(scored))
        return ForecastResult.insufficient()

    aggregates = daily_aggregates(scored)
    if len(aggregates) < MIN_DATA_POINTS:
        logger.debug("forecast.insufficient_data", days=len(aggregates))
        return ForecastResult.insufficient()

    scores = [a.average_score for a in aggregates]
    smoothed = moving_average(scores, min(SMOOTHING_WINDOW, len(scores)))
    slope, intercept = linear_regression(smoothed)
    last_smoothed = smoothed[-1]

    historical = tuple(
        ForecastPoint(a.date, a.average_score, a.sentiment, is_historical=True)
        for a in aggregates
    )

    last_day = aggregates[-1].date
    forecast = []
    for offset in range(1, FORECAST_DAYS + 1):
        day = last_day + timedelta(days=offset)
        day_index = len(aggregates) + offset - 1
        trend_score = slope * day_index + intercept
        predicted = TREND_WEIGHT * trend_score + LEVEL_WEIGHT * last_smoothed
        # Saturday / Sunday
        if day.weekday() >= 5:
            predicted += WEEKEND_BONUS
        predicted = max(-1.0, min(1.0, predicted))
        forecast.append(ForecastPoint(day, predicted, classify_score(predicted), is_historical=False))

    mean = sum(scores) / len(scores)
    variance = sum((s - mean) ** 2 for s in scores) / len(scores)
    confidence = max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, 1 - variance))

    trend = classify_trend(slope)
    mean_forecast = sum(p.score for p in forecast) / len(forecast)

    logger.debug(
        "forecast.computed",
        days=len(aggregates),
        slope=round(slope, 4),
        trend=str(trend),
        confidence=round(confidence, 3),
    )

    return ForecastResult(
        has_enough_data=True,
        historical=historical,
        forecast=tuple(forecast),
        confidence=confidence,
        trend=trend,
        recommendation=_recommend(trend, mean_forecast),
    )
