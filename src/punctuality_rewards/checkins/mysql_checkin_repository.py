from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import CheckInType
from ..core.exceptions import DuplicateCheckInError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetchall,
    fetchone,
    from_db_datetime,
    is_duplicate_key,
    to_db_datetime,
)
from .model import CheckIn
from .repository import CheckInRepository

_COLUMNS = "check_in_id, user_id, checked_in_at, civil_day, type, points_earned, qr_code_data, location"


def _row_to_checkin(r: dict) -> CheckIn:
    return CheckIn(
        check_in_id=int(r["check_in_id"]),
        user_id=int(r["user_id"]),
        checked_in_at=from_db_datetime(r["checked_in_at"]),
        civil_day=r["civil_day"],
        check_in_type=CheckInType(r["type"]),
        points_earned=int(r["points_earned"]),
        qr_code_data=r["qr_code_data"],
        location=r.get("location"),
    )


class MySQLCheckInRepository(CheckInRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_for_user_between(self, user_id: int, start: datetime, end: datetime) -> Optional[CheckIn]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM check_ins
                WHERE user_id=%s AND checked_in_at>=%s AND checked_in_at<=%s
                LIMIT 1
                """,
                (int(user_id), to_db_datetime(start), to_db_datetime(end)),
            )
            r = fetchone(cur)
            return _row_to_checkin(r) if r else None

    def list_for_user_since(self, user_id: int, since: datetime, limit: int) -> Sequence[CheckIn]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM check_ins
                WHERE user_id=%s AND checked_in_at>=%s
                ORDER BY checked_in_at DESC
                LIMIT %s
                """,
                (int(user_id), to_db_datetime(since), int(limit)),
            )
            return [_row_to_checkin(r) for r in fetchall(cur)]

    def list_recent_for_user(self, user_id: int, limit: int) -> Sequence[CheckIn]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM check_ins
                WHERE user_id=%s
                ORDER BY checked_in_at DESC
                LIMIT %s
                """,
                (int(user_id), int(limit)),
            )
            return [_row_to_checkin(r) for r in fetchall(cur)]

    def create_checkin(
        self,
        *,
        user_id: int,
        checked_in_at: datetime,
        civil_day: date,
        check_in_type: CheckInType,
        points_earned: int,
        qr_code_data: str,
        location: Optional[str] = None,
    ) -> CheckIn:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO check_ins(user_id, checked_in_at, civil_day, type, points_earned, qr_code_data, location)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        int(user_id),
                        to_db_datetime(checked_in_at),
                        civil_day,
                        check_in_type.value,
                        int(points_earned),
                        qr_code_data,
                        location,
                    ),
                )
                check_in_id = int(cur.lastrowid)
        except Exception as e:
            if is_duplicate_key(e):
                raise DuplicateCheckInError("You have already checked in today") from e
            raise

        return CheckIn(
            check_in_id=check_in_id,
            user_id=int(user_id),
            checked_in_at=checked_in_at,
            civil_day=civil_day,
            check_in_type=check_in_type,
            points_earned=int(points_earned),
            qr_code_data=qr_code_data,
            location=location,
        )
