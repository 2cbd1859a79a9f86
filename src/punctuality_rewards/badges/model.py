from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Badge:
    badge_id: int
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None


@dataclass(frozen=True)
class UserBadge:
    """A badge unlocked by one user."""

    user_badge_id: int
    user_id: int
    badge: Badge
    unlocked_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.user_badge_id,
            "badge_id": self.badge.badge_id,
            "name": self.badge.name,
            "description": self.badge.description,
            "icon": self.badge.icon,
            "color": self.badge.color,
            "unlocked_at": self.unlocked_at.isoformat(),
        }
