from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import RedemptionStatus, RewardCategory
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .model import Reward, RewardRedemption
from .repository import RedemptionRepository, RewardRepository

_COLUMNS = (
    "redemption_id, user_id, reward_id, points_cost, status, created_at, "
    "decided_by, decided_at, fulfilled_at, notes"
)


def _row_to_redemption(r: dict) -> RewardRedemption:
    return RewardRedemption(
        redemption_id=int(r["redemption_id"]),
        user_id=int(r["user_id"]),
        reward_id=int(r["reward_id"]),
        points_cost=int(r["points_cost"]),
        status=RedemptionStatus(r["status"]),
        created_at=from_db_datetime(r["created_at"]),
        decided_by=r.get("decided_by"),
        decided_at=from_db_datetime(r.get("decided_at")),
        fulfilled_at=from_db_datetime(r.get("fulfilled_at")),
        notes=r.get("notes"),
    )


class MySQLRewardRepository(RewardRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, reward_id: int) -> Optional[Reward]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT reward_id, company_id, name, description, points_cost, category, available
                FROM rewards
                WHERE reward_id=%s
                """,
                (int(reward_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Reward(
                reward_id=int(r["reward_id"]),
                company_id=int(r["company_id"]),
                name=r["name"],
                description=r.get("description"),
                points_cost=int(r["points_cost"]),
                category=RewardCategory(r["category"]),
                available=bool(r.get("available", True)),
            )


class MySQLRedemptionRepository(RedemptionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_redemption(
        self,
        *,
        user_id: int,
        reward_id: int,
        points_cost: int,
        created_at: datetime,
    ) -> RewardRedemption:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO reward_redemptions(user_id, reward_id, points_cost, status, created_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(user_id), int(reward_id), int(points_cost), RedemptionStatus.PENDING.value, to_db_datetime(created_at)),
            )
            redemption_id = int(cur.lastrowid)
        return RewardRedemption(
            redemption_id=redemption_id,
            user_id=int(user_id),
            reward_id=int(reward_id),
            points_cost=int(points_cost),
            status=RedemptionStatus.PENDING,
            created_at=created_at,
        )

    def get_by_id(self, redemption_id: int) -> Optional[RewardRedemption]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM reward_redemptions WHERE redemption_id=%s",
                (int(redemption_id),),
            )
            r = fetchone(cur)
            return _row_to_redemption(r) if r else None

    def list_recent_for_user(self, user_id: int, limit: int) -> Sequence[RewardRedemption]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM reward_redemptions
                WHERE user_id=%s
                ORDER BY created_at DESC
                LIMIT %s
                """,
                (int(user_id), int(limit)),
            )
            return [_row_to_redemption(r) for r in fetchall(cur)]

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
        if status == RedemptionStatus.FULFILLED:
            sql = """
                UPDATE reward_redemptions
                SET status=%s, fulfilled_at=%s, notes=COALESCE(%s, notes)
                WHERE redemption_id=%s AND status=%s
            """
            params = (status.value, to_db_datetime(at), notes, int(redemption_id), expected.value)
        else:
            sql = """
                UPDATE reward_redemptions
                SET status=%s, decided_by=%s, decided_at=%s, notes=COALESCE(%s, notes)
                WHERE redemption_id=%s AND status=%s
            """
            params = (status.value, int(decided_by), to_db_datetime(at), notes, int(redemption_id), expected.value)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0
