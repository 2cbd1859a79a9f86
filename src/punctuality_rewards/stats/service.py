from __future__ import annotations

import logging

from ..badges.repository import BadgeRepository
from ..bonuses.repository import BonusRepository
from ..checkins.repository import CheckInRepository
from ..common.civil_time import CivilCalendar
from ..common.clock import Clock, SystemClock
from ..companies.repository import CompanyRepository
from ..core import constants
from ..core.enums import Capability, Role
from ..core.exceptions import AuthorizationError, DomainError
from ..core.results import Failure, Result, Success
from ..redemptions.repository import RedemptionRepository
from ..users.repository import UserRepository
from .aggregator import civil_days_newest_first, compute_point_totals, compute_streaks
from .model import UserStats

logger = logging.getLogger(__name__)


class StatsService:
    """Use case: point balances and streaks for one user."""

    def __init__(
        self,
        checkins: CheckInRepository,
        bonuses: BonusRepository,
        redemptions: RedemptionRepository,
        badges: BadgeRepository,
        users: UserRepository,
        companies: CompanyRepository,
        *,
        clock: Clock | None = None,
        default_offset_minutes: int = constants.DEFAULT_UTC_OFFSET_MINUTES,
        history_limit: int = constants.STATS_HISTORY_LIMIT,
    ):
        self._checkins = checkins
        self._bonuses = bonuses
        self._redemptions = redemptions
        self._badges = badges
        self._users = users
        self._companies = companies
        self._clock = clock or SystemClock()
        self._default_offset = int(default_offset_minutes)
        self._history_limit = int(history_limit)

    def _calendar_for_user(self, user_id: int) -> CivilCalendar:
        user = self._users.get_by_id(user_id)
        company = None
        if user and user.company_id is not None:
            company = self._companies.get_by_id(user.company_id)
        return CivilCalendar.for_company(company, default_offset_minutes=self._default_offset)

    def fetch_user_stats(self, user_id: int, requesting_user_id: int, requesting_role) -> Result:
        """Boundary for callers: never raises, returns Success or Failure."""
        try:
            return Success(self.get_user_stats(user_id, requesting_user_id, requesting_role))
        except DomainError as e:
            logger.info("Stats request for user %s denied to %s: %s", user_id, requesting_user_id, e)
            return Failure.from_error(e)
        except Exception:
            logger.exception("Failed to load stats for user %s", user_id)
            return Failure.processing_failed("Failed to get stats")

    def get_user_stats(self, user_id: int, requesting_user_id: int, requesting_role) -> UserStats:
        role = Role.parse(requesting_role)
        if int(requesting_user_id) != int(user_id) and not role.supports(Capability.VIEW_ANY_STATS):
            raise AuthorizationError("Forbidden")

        user_id = int(user_id)
        check_ins = list(self._checkins.list_recent_for_user(user_id, self._history_limit))
        bonuses = list(self._bonuses.list_recent_for_user(user_id, self._history_limit))
        redemptions = list(self._redemptions.list_recent_for_user(user_id, self._history_limit))
        badges = list(self._badges.list_for_user(user_id))

        now = self._clock.now()
        calendar = self._calendar_for_user(user_id)

        points = compute_point_totals(check_ins, bonuses, redemptions, now=now)
        streaks = compute_streaks(civil_days_newest_first(check_ins, calendar), today=calendar.civil_day(now))

        return UserStats(
            user_id=user_id,
            points=points,
            streaks=streaks,
            total_check_ins=len(check_ins),
            recent_check_ins=tuple(check_ins[: constants.STATS_RECENT_LIMIT]),
            recent_bonus_points=tuple(bonuses[: constants.STATS_RECENT_LIMIT]),
            badges=tuple(badges),
            redemptions=tuple(redemptions),
        )

    def current_balance(self, user_id: int) -> int:
        user_id = int(user_id)
        return compute_point_totals(
            self._checkins.list_recent_for_user(user_id, self._history_limit),
            self._bonuses.list_recent_for_user(user_id, self._history_limit),
            self._redemptions.list_recent_for_user(user_id, self._history_limit),
            now=self._clock.now(),
        ).total
