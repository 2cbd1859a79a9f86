from __future__ import annotations

from datetime import date
from typing import Optional, Sequence


def trailing_streak(today: date, days_newest_first: Sequence[date]) -> int:
    """Length of the run of consecutive civil days ending today.

    ``days_newest_first[0]`` is the check-in that was just recorded and seeds the
    streak at 1. Older days extend it only while each is exactly one day before
    the last counted day; the first other gap stops the walk.
    """
    streak = 1
    last = today
    for day in days_newest_first[1:]:
        if (last - day).days != 1:
            break
        streak += 1
        last = day
    return streak


def milestone_for(streak: int, milestones: dict) -> Optional[tuple[int, str]]:
    """(points, reason) when ``streak`` lands exactly on a milestone."""
    return milestones.get(streak)
