from __future__ import annotations

import logging
import random
from datetime import date, datetime, timedelta
from typing import Optional

from ..bonuses.repository import BonusRepository
from ..common.civil_time import CivilCalendar
from ..common.clock import Clock, SystemClock
from ..common.validators import optional_text
from ..companies.repository import CompanyRepository
from ..core.exceptions import (
    DomainError,
    DuplicateCheckInError,
    InvalidTokenError,
    OutsideWindowError,
    ValidationError,
)
from ..core.results import Failure, Result, Success
from ..qrcodes.codes import parse_scanned_payload
from ..qrcodes.repository import QRCodeRepository
from ..users.repository import UserRepository
from .factory import CheckInStrategyFactory
from .model import CheckIn, CheckInReceipt
from .quotes import pick_quote
from .repository import CheckInRepository
from .rules import CheckInRules
from .streaks import milestone_for, trailing_streak

logger = logging.getLogger(__name__)


class CheckInService:
    """Use case: validate a QR check-in, score it and award streak bonuses."""

    def __init__(
        self,
        checkins: CheckInRepository,
        bonuses: BonusRepository,
        qr_codes: QRCodeRepository,
        users: UserRepository,
        companies: CompanyRepository,
        *,
        clock: Clock | None = None,
        rules: CheckInRules | None = None,
        strategy_factory: CheckInStrategyFactory | None = None,
        rng: random.Random | None = None,
    ):
        self._checkins = checkins
        self._bonuses = bonuses
        self._qr_codes = qr_codes
        self._users = users
        self._companies = companies
        self._clock = clock or SystemClock()
        self._rules = rules or CheckInRules()
        self._factory = strategy_factory or CheckInStrategyFactory()
        self._rng = rng

    def calendar_for(self, company_id: Optional[int]) -> CivilCalendar:
        company = self._companies.get_by_id(company_id) if company_id is not None else None
        return CivilCalendar.for_company(company, default_offset_minutes=self._rules.default_utc_offset_minutes)

    def process_check_in(
        self,
        user_id: int,
        qr_token: Optional[str],
        location: Optional[str] = None,
    ) -> Result:
        """Boundary for callers: never raises, returns Success or Failure."""
        try:
            return Success(self.check_in(user_id, qr_token, location))
        except DomainError as e:
            logger.info("Check-in rejected for user %s: %s (%s)", user_id, e.kind.value, e)
            return Failure.from_error(e)
        except Exception:
            logger.exception("Check-in failed for user %s", user_id)
            return Failure.processing_failed("Check-in failed")

    def check_in(
        self,
        user_id: int,
        qr_token: Optional[str],
        location: Optional[str] = None,
        *,
        now: datetime | None = None,
    ) -> CheckInReceipt:
        code = parse_scanned_payload(qr_token)
        if not code:
            raise ValidationError("QR code is required")
        location = optional_text(location, "location")

        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("Unknown user")

        now = now or self._clock.now()
        calendar = self.calendar_for(user.company_id)
        local = calendar.local(now)

        if not self._rules.in_window(local.hour):
            raise OutsideWindowError(
                f"Check-in is only available between {self._rules.window_start_hour}:00 "
                f"and {self._rules.window_end_hour}:00"
            )

        today = local.date()
        start, end = calendar.day_bounds(today)
        if self._checkins.find_for_user_between(user.user_id, start, end):
            raise DuplicateCheckInError("You have already checked in today")

        token = None
        if user.company_id is not None:
            token = self._qr_codes.find_valid(code=code, company_id=user.company_id, at=now)
        if not token:
            raise InvalidTokenError("This QR code is not valid or has expired")

        # All reads happen before the insert; nothing after it may fail the check-in.
        streak = self._streak_ending_today(user.user_id, today, calendar=calendar, now=now)

        strategy = self._factory.for_minute(minute_of_day=calendar.minute_of_day(now), rules=self._rules)
        decision = strategy.score(rules=self._rules)

        created = self._checkins.create_checkin(
            user_id=user.user_id,
            checked_in_at=now,
            civil_day=today,
            check_in_type=decision.check_in_type,
            points_earned=decision.points,
            qr_code_data=code,
            location=location,
        )
        logger.info(
            "User %s checked in %s at %s (+%s)",
            user.user_id,
            decision.check_in_type.value,
            local.strftime("%Y-%m-%d %H:%M"),
            decision.points,
        )

        bonus = self._award_streak_bonus(created, streak=streak, now=now)

        return CheckInReceipt(
            check_in_id=created.check_in_id,
            check_in_type=decision.check_in_type,
            points_earned=decision.points + bonus,
            current_streak=streak,
            message=decision.message,
            quote=self._quote_for(decision.check_in_type),
        )

    def _streak_ending_today(self, user_id: int, today: date, *, calendar: CivilCalendar, now: datetime) -> int:
        """Streak the new check-in will have, counting it as the newest entry."""
        since = now - timedelta(days=self._rules.streak_lookback_days)
        earlier = self._checkins.list_for_user_since(user_id, since, self._rules.streak_lookback_limit - 1)
        days = [today] + [calendar.civil_day(c.checked_in_at) for c in earlier]
        return trailing_streak(today, days)

    def _award_streak_bonus(self, created: CheckIn, *, streak: int, now: datetime) -> int:
        milestone = milestone_for(streak, self._rules.streak_milestones)
        if not milestone:
            return 0

        points, reason = milestone
        try:
            self._bonuses.create_grant(
                user_id=created.user_id,
                points=points,
                reason=reason,
                awarded_by=created.user_id,
                created_at=now,
            )
        except Exception:
            logger.exception(
                "Check-in %s is stored but the %s-day streak bonus (+%s) for user %s was not recorded",
                created.check_in_id,
                streak,
                points,
                created.user_id,
            )
            return 0
        logger.info("User %s reached a %s-day streak (+%s bonus)", created.user_id, streak, points)
        return points

    def _quote_for(self, check_in_type):
        try:
            return pick_quote(check_in_type, self._rng)
        except Exception:
            logger.warning("Quote lookup failed for %s", check_in_type, exc_info=True)
            return None
