from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import RedemptionStatus, RewardCategory


@dataclass(frozen=True)
class Reward:
    reward_id: int
    company_id: int
    name: str
    points_cost: int
    category: RewardCategory = RewardCategory.MONTHLY
    description: Optional[str] = None
    available: bool = True


@dataclass(frozen=True)
class RewardRedemption:
    """A point-spend request. Rejected redemptions do not count as spent."""

    redemption_id: int
    user_id: int
    reward_id: int
    points_cost: int
    status: RedemptionStatus
    created_at: datetime
    decided_by: Optional[int] = None
    decided_at: Optional[datetime] = None
    fulfilled_at: Optional[datetime] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.redemption_id,
            "user_id": self.user_id,
            "reward_id": self.reward_id,
            "points_cost": self.points_cost,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "decided_by": self.decided_by,
            "decided_at": self.decided_at.isoformat() if self.decided_at else None,
            "fulfilled_at": self.fulfilled_at.isoformat() if self.fulfilled_at else None,
            "notes": self.notes,
        }
