from __future__ import annotations

import logging
from typing import Optional

from ..common.clock import Clock, SystemClock
from ..common.validators import optional_text
from ..core.enums import Capability, RedemptionStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..stats.service import StatsService
from ..users.repository import UserRepository
from .model import RewardRedemption
from .repository import RedemptionRepository, RewardRepository

logger = logging.getLogger(__name__)

# target status -> status it must currently be in
_TRANSITIONS = {
    RedemptionStatus.APPROVED: RedemptionStatus.PENDING,
    RedemptionStatus.REJECTED: RedemptionStatus.PENDING,
    RedemptionStatus.FULFILLED: RedemptionStatus.APPROVED,
}


class RedemptionService:
    def __init__(
        self,
        redemptions: RedemptionRepository,
        rewards: RewardRepository,
        users: UserRepository,
        stats: StatsService,
        *,
        clock: Clock | None = None,
    ):
        self._redemptions = redemptions
        self._rewards = rewards
        self._users = users
        self._stats = stats
        self._clock = clock or SystemClock()

    def request_redemption(self, *, user_id: int, reward_id: int) -> RewardRedemption:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise ValidationError("Unknown user")

        reward = self._rewards.get_by_id(int(reward_id))
        if not reward or reward.company_id != user.company_id:
            raise NotFoundError("Reward not found")
        if not reward.available:
            raise ValidationError("This reward is not available")

        balance = self._stats.current_balance(user.user_id)
        if balance < reward.points_cost:
            raise ValidationError(f"Not enough points: {balance} available, {reward.points_cost} needed")

        redemption = self._redemptions.create_redemption(
            user_id=user.user_id,
            reward_id=reward.reward_id,
            points_cost=reward.points_cost,
            created_at=self._clock.now(),
        )
        logger.info("User %s requested reward %s for %s points", user.user_id, reward.reward_id, reward.points_cost)
        return redemption

    def approve(self, *, current_role, admin_user_id: int, redemption_id: int, notes: str = "") -> None:
        self._decide(current_role, admin_user_id, redemption_id, RedemptionStatus.APPROVED, notes)

    def reject(self, *, current_role, admin_user_id: int, redemption_id: int, notes: str = "") -> None:
        self._decide(current_role, admin_user_id, redemption_id, RedemptionStatus.REJECTED, notes)

    def fulfill(self, *, current_role, admin_user_id: int, redemption_id: int, notes: str = "") -> None:
        self._decide(current_role, admin_user_id, redemption_id, RedemptionStatus.FULFILLED, notes)

    def _decide(
        self,
        current_role,
        admin_user_id: int,
        redemption_id: int,
        status: RedemptionStatus,
        notes: Optional[str],
    ) -> None:
        if not Role.parse(current_role).supports(Capability.MANAGE_REDEMPTIONS):
            raise AuthorizationError("You are not allowed to manage redemptions")

        redemption = self._redemptions.get_by_id(int(redemption_id))
        if not redemption:
            raise NotFoundError("Redemption not found")

        expected = _TRANSITIONS[status]
        if redemption.status != expected:
            raise ValidationError(f"Cannot mark a {redemption.status.value} redemption as {status.value}")

        updated = self._redemptions.update_status(
            redemption_id=redemption.redemption_id,
            expected=expected,
            status=status,
            decided_by=int(admin_user_id),
            at=self._clock.now(),
            notes=optional_text(notes, "notes"),
        )
        if not updated:
            raise ValidationError("Redemption was already processed")
        logger.info("Redemption %s marked %s by %s", redemption.redemption_id, status.value, admin_user_id)
