from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import CheckInType


@dataclass(frozen=True)
class CheckIn:
    """Domain entity: one check-in per user per civil day."""

    check_in_id: int
    user_id: int
    checked_in_at: datetime
    civil_day: date
    check_in_type: CheckInType
    points_earned: int
    qr_code_data: str
    location: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.check_in_id,
            "user_id": self.user_id,
            "checked_in_at": self.checked_in_at.isoformat(),
            "civil_day": self.civil_day.isoformat(),
            "type": self.check_in_type.value,
            "points_earned": self.points_earned,
            "location": self.location,
        }


@dataclass(frozen=True)
class Quote:
    text: str
    author: str

    def to_dict(self) -> dict:
        return {"text": self.text, "author": self.author}


@dataclass(frozen=True)
class CheckInReceipt:
    """What the caller gets back after a successful check-in."""

    check_in_id: int
    check_in_type: CheckInType
    points_earned: int
    current_streak: int
    message: str
    quote: Optional[Quote] = None

    def to_dict(self) -> dict:
        return {
            "success": True,
            "check_in_id": self.check_in_id,
            "type": self.check_in_type.value,
            "points_earned": self.points_earned,
            "current_streak": self.current_streak,
            "message": self.message,
            "quote": self.quote.to_dict() if self.quote else None,
        }
