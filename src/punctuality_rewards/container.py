from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .badges.mysql_badge_repository import MySQLBadgeRepository
from .badges.repository import BadgeRepository
from .bonuses.mysql_bonus_repository import MySQLBonusRepository
from .bonuses.repository import BonusRepository
from .checkins.factory import CheckInStrategyFactory
from .checkins.mysql_checkin_repository import MySQLCheckInRepository
from .checkins.repository import CheckInRepository
from .checkins.rules import CheckInRules
from .checkins.service import CheckInService
from .common.clock import Clock, SystemClock
from .companies.mysql_company_repository import MySQLCompanyRepository
from .companies.repository import CompanyRepository
from .core import constants
from .database.connection import DBConfig, DatabaseConnection
from .qrcodes.mysql_qr_code_repository import MySQLQRCodeRepository
from .qrcodes.repository import QRCodeRepository
from .qrcodes.service import QRCodeService
from .redemptions.mysql_redemption_repository import MySQLRedemptionRepository, MySQLRewardRepository
from .redemptions.repository import RedemptionRepository, RewardRepository
from .redemptions.service import RedemptionService
from .stats.service import StatsService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    companies_repo: CompanyRepository
    checkins_repo: CheckInRepository
    bonuses_repo: BonusRepository
    badges_repo: BadgeRepository
    rewards_repo: RewardRepository
    redemptions_repo: RedemptionRepository
    qr_codes_repo: QRCodeRepository

    checkin_service: CheckInService
    stats_service: StatsService
    redemption_service: RedemptionService
    qr_code_service: QRCodeService

    conn: Optional[DatabaseConnection] = None


def assemble(
    *,
    users_repo: UserRepository,
    companies_repo: CompanyRepository,
    checkins_repo: CheckInRepository,
    bonuses_repo: BonusRepository,
    badges_repo: BadgeRepository,
    rewards_repo: RewardRepository,
    redemptions_repo: RedemptionRepository,
    qr_codes_repo: QRCodeRepository,
    clock: Clock | None = None,
    rules: CheckInRules | None = None,
    checkin_url_base: str = constants.DEFAULT_CHECKIN_URL_BASE,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    clock = clock or SystemClock()
    rules = rules or CheckInRules()

    checkin_service = CheckInService(
        checkins_repo,
        bonuses_repo,
        qr_codes_repo,
        users_repo,
        companies_repo,
        clock=clock,
        rules=rules,
        strategy_factory=CheckInStrategyFactory(),
    )
    stats_service = StatsService(
        checkins_repo,
        bonuses_repo,
        redemptions_repo,
        badges_repo,
        users_repo,
        companies_repo,
        clock=clock,
        default_offset_minutes=rules.default_utc_offset_minutes,
    )
    redemption_service = RedemptionService(redemptions_repo, rewards_repo, users_repo, stats_service, clock=clock)
    qr_code_service = QRCodeService(
        qr_codes_repo,
        companies_repo,
        clock=clock,
        url_base=checkin_url_base,
        default_offset_minutes=rules.default_utc_offset_minutes,
    )

    return Container(
        users_repo=users_repo,
        companies_repo=companies_repo,
        checkins_repo=checkins_repo,
        bonuses_repo=bonuses_repo,
        badges_repo=badges_repo,
        rewards_repo=rewards_repo,
        redemptions_repo=redemptions_repo,
        qr_codes_repo=qr_codes_repo,
        checkin_service=checkin_service,
        stats_service=stats_service,
        redemption_service=redemption_service,
        qr_code_service=qr_code_service,
        conn=conn,
    )


def build_container(*, db_config: dict, settings=None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        users_repo=MySQLUserRepository(conn),
        companies_repo=MySQLCompanyRepository(conn),
        checkins_repo=MySQLCheckInRepository(conn),
        bonuses_repo=MySQLBonusRepository(conn),
        badges_repo=MySQLBadgeRepository(conn),
        rewards_repo=MySQLRewardRepository(conn),
        redemptions_repo=MySQLRedemptionRepository(conn),
        qr_codes_repo=MySQLQRCodeRepository(conn),
        rules=CheckInRules.from_settings(settings) if settings is not None else None,
        checkin_url_base=getattr(settings, "CHECKIN_URL_BASE", constants.DEFAULT_CHECKIN_URL_BASE),
        conn=conn,
    )
