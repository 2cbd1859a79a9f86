from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Optional

import pytest

from punctuality_rewards.badges.model import Badge, UserBadge
from punctuality_rewards.bonuses.model import BonusGrant
from punctuality_rewards.checkins.model import CheckIn
from punctuality_rewards.common.civil_time import CivilCalendar
from punctuality_rewards.common.clock import FixedClock, as_utc
from punctuality_rewards.companies.model import Company
from punctuality_rewards.container import assemble
from punctuality_rewards.core.enums import CheckInType, RedemptionStatus, Role, RotationStrategy
from punctuality_rewards.core.exceptions import DuplicateCheckInError
from punctuality_rewards.qrcodes.model import QRToken
from punctuality_rewards.redemptions.model import Reward, RewardRedemption
from punctuality_rewards.users.model import User

UTC = timezone.utc
MST = CivilCalendar.fixed_offset(-420)


def local_instant(day: date, hour: int, minute: int = 0, second: int = 0) -> datetime:
    """UTC instant for a wall-clock time in the UTC-7 test company."""
    return datetime(day.year, day.month, day.day, hour, minute, second, tzinfo=MST.tz).astimezone(UTC)


class InMemoryUsers:
    def __init__(self, users):
        self.users_by_id = {u.user_id: u for u in users}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users_by_id.get(int(user_id))


class InMemoryCompanies:
    def __init__(self, companies):
        self.companies = {c.company_id: c for c in companies}

    def get_by_id(self, company_id: int) -> Optional[Company]:
        return self.companies.get(int(company_id))


class InMemoryCheckIns:
    def __init__(self):
        self.rows: list[CheckIn] = []
        self._id = 0
        self.fail_next_create: Optional[Exception] = None

    def _for_user(self, user_id):
        items = [c for c in self.rows if c.user_id == user_id]
        items.sort(key=lambda c: c.checked_in_at, reverse=True)
        return items

    def find_for_user_between(self, user_id, start, end):
        for c in self._for_user(user_id):
            if start <= c.checked_in_at <= end:
                return c
        return None

    def list_for_user_since(self, user_id, since, limit):
        return [c for c in self._for_user(user_id) if c.checked_in_at >= since][:limit]

    def list_recent_for_user(self, user_id, limit):
        return self._for_user(user_id)[:limit]

    def create_checkin(self, *, user_id, checked_in_at, civil_day, check_in_type, points_earned, qr_code_data, location=None):
        if self.fail_next_create is not None:
            error, self.fail_next_create = self.fail_next_create, None
            raise error
        if any(c.user_id == user_id and c.civil_day == civil_day for c in self.rows):
            raise DuplicateCheckInError("You have already checked in today")
        self._id += 1
        rec = CheckIn(
            check_in_id=self._id,
            user_id=user_id,
            checked_in_at=as_utc(checked_in_at),
            civil_day=civil_day,
            check_in_type=check_in_type,
            points_earned=points_earned,
            qr_code_data=qr_code_data,
            location=location,
        )
        self.rows.append(rec)
        return rec

    def seed(self, user_id: int, day: date, *, hour=7, minute=0, points=2, check_in_type=CheckInType.EARLY):
        return self.create_checkin(
            user_id=user_id,
            checked_in_at=local_instant(day, hour, minute),
            civil_day=day,
            check_in_type=check_in_type,
            points_earned=points,
            qr_code_data="SEED",
        )

    def seed_run(self, user_id: int, last_day: date, length: int):
        for offset in range(length):
            self.seed(user_id, last_day - timedelta(days=offset))


class InMemoryBonuses:
    def __init__(self):
        self.rows: list[BonusGrant] = []
        self.fail_next_create: Optional[Exception] = None

    def create_grant(self, *, user_id, points, reason, awarded_by, created_at):
        if self.fail_next_create is not None:
            error, self.fail_next_create = self.fail_next_create, None
            raise error
        grant = BonusGrant(
            bonus_id=len(self.rows) + 1,
            user_id=user_id,
            points=points,
            reason=reason,
            awarded_by=awarded_by,
            created_at=as_utc(created_at),
        )
        self.rows.append(grant)
        return grant

    def list_recent_for_user(self, user_id, limit):
        items = [b for b in self.rows if b.user_id == user_id]
        items.sort(key=lambda b: b.created_at, reverse=True)
        return items[:limit]


class InMemoryBadges:
    def __init__(self):
        self.rows: list[UserBadge] = []

    def list_for_user(self, user_id):
        return [b for b in self.rows if b.user_id == user_id]


class InMemoryRewards:
    def __init__(self, rewards):
        self.rewards = {r.reward_id: r for r in rewards}

    def get_by_id(self, reward_id):
        return self.rewards.get(int(reward_id))


class InMemoryRedemptions:
    def __init__(self):
        self.rows: dict[int, RewardRedemption] = {}

    def create_redemption(self, *, user_id, reward_id, points_cost, created_at):
        rid = len(self.rows) + 1
        self.rows[rid] = RewardRedemption(
            redemption_id=rid,
            user_id=user_id,
            reward_id=reward_id,
            points_cost=points_cost,
            status=RedemptionStatus.PENDING,
            created_at=as_utc(created_at),
        )
        return self.rows[rid]

    def get_by_id(self, redemption_id):
        return self.rows.get(int(redemption_id))

    def list_recent_for_user(self, user_id, limit):
        items = [r for r in self.rows.values() if r.user_id == user_id]
        items.sort(key=lambda r: r.created_at, reverse=True)
        return items[:limit]

    def update_status(self, *, redemption_id, expected, status, decided_by, at, notes=None):
        current = self.rows.get(int(redemption_id))
        if not current or current.status != expected:
            return False
        if status == RedemptionStatus.FULFILLED:
            self.rows[current.redemption_id] = replace(current, status=status, fulfilled_at=at, notes=notes or current.notes)
        else:
            self.rows[current.redemption_id] = replace(
                current, status=status, decided_by=decided_by, decided_at=at, notes=notes or current.notes
            )
        return True

    def seed(self, user_id, cost, status, created_at):
        rec = self.create_redemption(user_id=user_id, reward_id=1, points_cost=cost, created_at=created_at)
        self.rows[rec.redemption_id] = replace(rec, status=status)
        return self.rows[rec.redemption_id]


class InMemoryQRCodes:
    def __init__(self):
        self.rows: list[QRToken] = []

    def find_valid(self, *, code, company_id, at):
        for t in self.rows:
            if t.code == code and t.company_id == company_id and t.is_valid_at(at):
                return t
        return None

    def find_by_code(self, *, code, company_id):
        for t in self.rows:
            if t.code == code and t.company_id == company_id:
                return t
        return None

    def latest_valid_for_company(self, company_id, at):
        valid = [t for t in self.rows if t.company_id == company_id and t.is_valid_at(at)]
        valid.sort(key=lambda t: (t.valid_from, t.qr_code_id), reverse=True)
        return valid[0] if valid else None

    def create_token(self, *, code, valid_from, valid_until, company_id, created_by, rotation_strategy):
        token = QRToken(
            qr_code_id=len(self.rows) + 1,
            code=code,
            valid_from=valid_from,
            valid_until=valid_until,
            company_id=company_id,
            created_by=created_by,
            rotation_strategy=rotation_strategy,
        )
        self.rows.append(token)
        return token


@pytest.fixture
def at_local():
    return local_instant


@pytest.fixture
def today() -> date:
    return date(2026, 2, 2)


@pytest.fixture
def fixed_now(today) -> datetime:
    # 06:30 in the UTC-7 company
    return local_instant(today, 6, 30)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def repos(today):
    company = Company(company_id=1, name="Acme", utc_offset_minutes=-420)
    other = Company(company_id=2, name="Globex", utc_offset_minutes=0)
    users = [
        User(user_id=1, name="Ana", email="ana@acme.test", role=Role.EMPLOYEE, company_id=1),
        User(user_id=2, name="Ben", email="ben@acme.test", role=Role.EMPLOYEE, company_id=1),
        User(user_id=3, name="Cy", email="cy@globex.test", role=Role.EMPLOYEE, company_id=2),
        User(user_id=9, name="Admin", email="admin@acme.test", role=Role.ADMIN, company_id=1),
    ]

    qr_codes = InMemoryQRCodes()
    start, end = MST.day_bounds(today)
    qr_codes.create_token(
        code="SK2026-TODAY-000001",
        valid_from=start,
        valid_until=end,
        company_id=1,
        created_by=9,
        rotation_strategy=RotationStrategy.DAILY,
    )

    badges = InMemoryBadges()
    badges.rows.append(
        UserBadge(
            user_badge_id=1,
            user_id=1,
            badge=Badge(badge_id=1, name="Early Bird", icon="sunrise"),
            unlocked_at=local_instant(today - timedelta(days=3), 7),
        )
    )

    return SimpleNamespace(
        users=InMemoryUsers(users),
        companies=InMemoryCompanies([company, other]),
        checkins=InMemoryCheckIns(),
        bonuses=InMemoryBonuses(),
        badges=badges,
        rewards=InMemoryRewards(
            [
                Reward(reward_id=1, company_id=1, name="Coffee", points_cost=10),
                Reward(reward_id=2, company_id=1, name="Day off", points_cost=100, available=False),
                Reward(reward_id=3, company_id=2, name="Lunch", points_cost=5),
            ]
        ),
        redemptions=InMemoryRedemptions(),
        qr_codes=qr_codes,
    )


@pytest.fixture
def container(repos, clock):
    return assemble(
        users_repo=repos.users,
        companies_repo=repos.companies,
        checkins_repo=repos.checkins,
        bonuses_repo=repos.bonuses,
        badges_repo=repos.badges,
        rewards_repo=repos.rewards,
        redemptions_repo=repos.redemptions,
        qr_codes_repo=repos.qr_codes,
        clock=clock,
        checkin_url_base="https://punctuality.example.com/checkin",
    )
