from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta
from typing import Optional

from ..common.civil_time import CivilCalendar
from ..common.clock import Clock, SystemClock, as_utc
from ..companies.repository import CompanyRepository
from ..core import constants
from ..core.enums import Capability, Role, RotationStrategy
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .codes import checkin_url, generate_code, render_png
from .model import QRToken
from .repository import QRCodeRepository

logger = logging.getLogger(__name__)

_ROTATION_DAYS = {
    RotationStrategy.DAILY: 1,
    RotationStrategy.WEEKLY: 7,
    RotationStrategy.MONTHLY: 30,
}


class QRCodeService:
    """Use case: admins issue and print company check-in codes."""

    def __init__(
        self,
        qr_codes: QRCodeRepository,
        companies: CompanyRepository,
        *,
        clock: Clock | None = None,
        url_base: str = constants.DEFAULT_CHECKIN_URL_BASE,
        default_offset_minutes: int = constants.DEFAULT_UTC_OFFSET_MINUTES,
        rng: random.Random | None = None,
    ):
        self._qr_codes = qr_codes
        self._companies = companies
        self._clock = clock or SystemClock()
        self._url_base = url_base
        self._default_offset = int(default_offset_minutes)
        self._rng = rng

    def validity_window(
        self,
        *,
        calendar: CivilCalendar,
        rotation: RotationStrategy,
        now: datetime,
        valid_until: Optional[datetime] = None,
    ) -> tuple[datetime, datetime]:
        if rotation == RotationStrategy.MANUAL:
            if valid_until is None:
                raise ValidationError("valid_until is required for manual rotation")
            valid_until = as_utc(valid_until)
            if valid_until <= now:
                raise ValidationError("valid_until must be in the future")
            return now, valid_until

        today = calendar.civil_day(now)
        start = calendar.start_of_day(today)
        last_day = today + timedelta(days=_ROTATION_DAYS[rotation] - 1)
        _, end = calendar.day_bounds(last_day)
        return start, end

    def issue_token(
        self,
        *,
        current_role: Role,
        company_id: int,
        created_by: Optional[int],
        rotation: RotationStrategy = RotationStrategy.DAILY,
        valid_until: Optional[datetime] = None,
    ) -> QRToken:
        if not Role.parse(current_role).supports(Capability.MANAGE_QR_CODES):
            raise AuthorizationError("You are not allowed to manage QR codes")

        company = self._companies.get_by_id(int(company_id))
        if not company:
            raise NotFoundError("Company not found")

        now = self._clock.now()
        calendar = CivilCalendar.for_company(company, default_offset_minutes=self._default_offset)
        valid_from, until = self.validity_window(
            calendar=calendar, rotation=rotation, now=now, valid_until=valid_until
        )

        token = self._qr_codes.create_token(
            code=generate_code(now, self._rng),
            valid_from=valid_from,
            valid_until=until,
            company_id=company.company_id,
            created_by=created_by,
            rotation_strategy=rotation,
        )
        logger.info(
            "Issued %s QR code %s for company %s (until %s)",
            rotation.value,
            token.code,
            company.company_id,
            until.isoformat(),
        )
        return token

    def active_token(self, company_id: int) -> Optional[QRToken]:
        return self._qr_codes.latest_valid_for_company(int(company_id), self._clock.now())

    def checkin_url(self, code: str) -> str:
        return checkin_url(self._url_base, code)

    def render_png(self, code: str, *, company_id: int) -> bytes:
        """PNG of the check-in URL for a code issued to ``company_id``."""
        token = self._qr_codes.find_by_code(code=code, company_id=int(company_id))
        if not token:
            raise NotFoundError("QR code not found")
        return render_png(self.checkin_url(token.code))
