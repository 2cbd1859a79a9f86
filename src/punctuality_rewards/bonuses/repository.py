from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import BonusGrant


class BonusRepository(Protocol):
    def create_grant(
        self,
        *,
        user_id: int,
        points: int,
        reason: str,
        awarded_by: int,
        created_at: datetime,
    ) -> BonusGrant:
        raise NotImplementedError

    def list_recent_for_user(self, user_id: int, limit: int) -> Sequence[BonusGrant]:
        """Newest first."""
        raise NotImplementedError
