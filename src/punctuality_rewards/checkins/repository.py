from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import CheckInType
from .model import CheckIn


class CheckInRepository(Protocol):
    def find_for_user_between(self, user_id: int, start: datetime, end: datetime) -> Optional[CheckIn]:
        raise NotImplementedError

    def list_for_user_since(self, user_id: int, since: datetime, limit: int) -> Sequence[CheckIn]:
        """Newest first."""
        raise NotImplementedError

    def list_recent_for_user(self, user_id: int, limit: int) -> Sequence[CheckIn]:
        """Newest first."""
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        user_id: int,
        checked_in_at: datetime,
        civil_day: date,
        check_in_type: CheckInType,
        points_earned: int,
        qr_code_data: str,
        location: Optional[str] = None,
    ) -> CheckIn:
        """Insert atomically, raising DuplicateCheckInError when (user, civil_day) exists."""
        raise NotImplementedError
