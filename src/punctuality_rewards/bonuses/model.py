from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BonusGrant:
    """Streak or discretionary point award. Immutable once created."""

    bonus_id: int
    user_id: int
    points: int
    reason: str
    awarded_by: int
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.bonus_id,
            "user_id": self.user_id,
            "points": self.points,
            "reason": self.reason,
            "awarded_by": self.awarded_by,
            "created_at": self.created_at.isoformat(),
        }
