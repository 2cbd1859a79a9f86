from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..badges.model import UserBadge
from ..bonuses.model import BonusGrant
from ..checkins.model import CheckIn
from ..redemptions.model import RewardRedemption


@dataclass(frozen=True)
class PointTotals:
    total: int = 0
    weekly: int = 0
    monthly: int = 0
    quarterly: int = 0


@dataclass(frozen=True)
class StreakSummary:
    current: int = 0
    longest: int = 0


@dataclass(frozen=True)
class UserStats:
    """Read-model returned by the stats endpoint."""

    user_id: int
    points: PointTotals
    streaks: StreakSummary
    total_check_ins: int
    recent_check_ins: Sequence[CheckIn] = field(default_factory=tuple)
    recent_bonus_points: Sequence[BonusGrant] = field(default_factory=tuple)
    badges: Sequence[UserBadge] = field(default_factory=tuple)
    redemptions: Sequence[RewardRedemption] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "total_points": self.points.total,
            "weekly_points": self.points.weekly,
            "monthly_points": self.points.monthly,
            "quarterly_points": self.points.quarterly,
            "current_streak": self.streaks.current,
            "longest_streak": self.streaks.longest,
            "total_check_ins": self.total_check_ins,
            "recent_check_ins": [c.to_dict() for c in self.recent_check_ins],
            "recent_bonus_points": [b.to_dict() for b in self.recent_bonus_points],
            "badges": [b.to_dict() for b in self.badges],
            "redemptions": [r.to_dict() for r in self.redemptions],
        }
