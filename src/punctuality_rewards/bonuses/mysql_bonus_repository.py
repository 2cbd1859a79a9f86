from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, from_db_datetime, to_db_datetime
from .model import BonusGrant
from .repository import BonusRepository


class MySQLBonusRepository(BonusRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_grant(
        self,
        *,
        user_id: int,
        points: int,
        reason: str,
        awarded_by: int,
        created_at: datetime,
    ) -> BonusGrant:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO bonus_points(user_id, points, reason, awarded_by, created_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(user_id), int(points), reason, int(awarded_by), to_db_datetime(created_at)),
            )
            bonus_id = int(cur.lastrowid)
        return BonusGrant(
            bonus_id=bonus_id,
            user_id=int(user_id),
            points=int(points),
            reason=reason,
            awarded_by=int(awarded_by),
            created_at=created_at,
        )

    def list_recent_for_user(self, user_id: int, limit: int) -> Sequence[BonusGrant]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT bonus_id, user_id, points, reason, awarded_by, created_at
                FROM bonus_points
                WHERE user_id=%s
                ORDER BY created_at DESC
                LIMIT %s
                """,
                (int(user_id), int(limit)),
            )
            rows = fetchall(cur)
            return [
                BonusGrant(
                    bonus_id=int(r["bonus_id"]),
                    user_id=int(r["user_id"]),
                    points=int(r["points"]),
                    reason=r["reason"],
                    awarded_by=int(r["awarded_by"]),
                    created_at=from_db_datetime(r["created_at"]),
                )
                for r in rows
            ]
