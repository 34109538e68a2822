"""Journaling streaks and badge levels."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from shared_types import BadgeLevel

BADGE_THRESHOLDS = (
    (30, BadgeLevel.GOLD),
    (14, BadgeLevel.SILVER),
    (7, BadgeLevel.BRONZE),
)


@dataclass(frozen=True)
class StreakData:
    current_streak: int = 0
    longest_streak: int = 0
    last_entry_date: Optional[date] = None
    badge_level: Optional[BadgeLevel] = None

    def to_dict(self) -> dict:
        return {
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "last_entry_date": self.last_entry_date.isoformat() if self.last_entry_date else None,
            "badge_level": self.badge_level,
        }


def badge_for(streak: int) -> Optional[BadgeLevel]:
    for threshold, badge in BADGE_THRESHOLDS:
        if streak >= threshold:
            return badge
    return None


def compute_streak(entry_dates: Iterable[date], today: date) -> StreakData:
    """Compute streaks from the days entries were written.

    The current streak is the run of consecutive days ending at the latest entry,
    and resets to 0 once a full day has been missed (latest entry before yesterday).
    """
    days = sorted(set(entry_dates))
    if not days:
        return StreakData()

    longest = run = 1
    for prev, cur in zip(days, days[1:]):
        run = run + 1 if cur - prev == timedelta(days=1) else 1
        longest = max(longest, run)

    last = days[-1]
    current = run if (today - last).days <= 1 else 0

    return StreakData(
        current_streak=current,
        longest_streak=longest,
        last_entry_date=last,
        badge_level=badge_for(current),
    )
