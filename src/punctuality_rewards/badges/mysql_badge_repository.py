from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, from_db_datetime
from .model import Badge, UserBadge
from .repository import BadgeRepository


class MySQLBadgeRepository(BadgeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, user_id: int) -> Sequence[UserBadge]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT ub.user_badge_id, ub.user_id, ub.unlocked_at,
                       b.badge_id, b.name, b.description, b.icon, b.color
                FROM user_badges ub
                JOIN badges b ON b.badge_id = ub.badge_id
                WHERE ub.user_id=%s
                ORDER BY ub.unlocked_at DESC
                """,
                (int(user_id),),
            )
            return [
                UserBadge(
                    user_badge_id=int(r["user_badge_id"]),
                    user_id=int(r["user_id"]),
                    badge=Badge(
                        badge_id=int(r["badge_id"]),
                        name=r["name"],
                        description=r.get("description"),
                        icon=r.get("icon"),
                        color=r.get("color"),
                    ),
                    unlocked_at=from_db_datetime(r["unlocked_at"]),
                )
                for r in fetchall(cur)
            ]
