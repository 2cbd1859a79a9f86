"""Pure point and streak computations over a user's history.

Nothing here touches storage; callers pass the records they loaded.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Sequence

from ..bonuses.model import BonusGrant
from ..checkins.model import CheckIn
from ..common.civil_time import CivilCalendar
from ..common.clock import as_utc
from ..core import constants
from ..redemptions.model import RewardRedemption
from .model import PointTotals, StreakSummary


def compute_point_totals(
    check_ins: Iterable[CheckIn],
    bonuses: Iterable[BonusGrant],
    redemptions: Iterable[RewardRedemption],
    *,
    now: datetime,
) -> PointTotals:
    week_ago = now - timedelta(days=constants.WEEK_DAYS)
    month_ago = now - timedelta(days=constants.MONTH_DAYS)
    quarter_ago = now - timedelta(days=constants.QUARTER_DAYS)

    earned = [(c.points_earned, as_utc(c.checked_in_at)) for c in check_ins]
    earned += [(b.points, as_utc(b.created_at)) for b in bonuses]

    total = weekly = monthly = quarterly = 0
    for points, at in earned:
        total += points
        if at >= week_ago:
            weekly += points
        if at >= month_ago:
            monthly += points
        if at >= quarter_ago:
            quarterly += points

    total -= sum(r.points_cost for r in redemptions if r.status.counts_as_spent)
    return PointTotals(total=total, weekly=weekly, monthly=monthly, quarterly=quarterly)


def compute_streaks(days_newest_first: Sequence[date], *, today: date) -> StreakSummary:
    """Current and longest run of consecutive civil days.

    The current streak only exists when the newest day is today or yesterday. If
    it is older, nothing is counted at all (longest stays 0 as well).
    """
    current = longest = temp = 0
    last = None

    for index, day in enumerate(days_newest_first):
        if index == 0:
            if day == today or day == today - timedelta(days=1):
                current = temp = 1
                last = day
            continue
        if last is None:
            continue

        if (last - day).days == 1:
            temp += 1
            if current > 0:
                current += 1
        else:
            longest = max(longest, temp)
            temp = 1
            current = 0
        last = day

    longest = max(longest, temp)
    return StreakSummary(current=current, longest=longest)


def civil_days_newest_first(check_ins: Iterable[CheckIn], calendar: CivilCalendar) -> list[date]:
    ordered = sorted(check_ins, key=lambda c: as_utc(c.checked_in_at), reverse=True)
    return [calendar.civil_day(c.checked_in_at) for c in ordered]
