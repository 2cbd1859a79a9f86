from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import RedemptionStatus
from .model import Reward, RewardRedemption


class RewardRepository(Protocol):
    def get_by_id(self, reward_id: int) -> Optional[Reward]:
        raise NotImplementedError


class RedemptionRepository(Protocol):
    def create_redemption(
        self,
        *,
        user_id: int,
        reward_id: int,
        points_cost: int,
        created_at: datetime,
    ) -> RewardRedemption:
        raise NotImplementedError

    def get_by_id(self, redemption_id: int) -> Optional[RewardRedemption]:
        raise NotImplementedError

    def list_recent_for_user(self, user_id: int, limit: int) -> Sequence[RewardRedemption]:
        """Newest first."""
        raise NotImplementedError

    def update_status(
        self,
        *,
        redemption_id: int,
        expected: RedemptionStatus,
        status: RedemptionStatus,
        decided_by: int,
        at: datetime,
        notes: Optional[str] = None,
    ) -> bool:
        """Compare-and-set: only updates while the row is still in ``expected``."""
        raise NotImplementedError
