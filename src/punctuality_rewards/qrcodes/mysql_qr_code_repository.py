from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import RotationStrategy
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, from_db_datetime, to_db_datetime
from .model import QRToken
from .repository import QRCodeRepository

_COLUMNS = "qr_code_id, code, valid_from, valid_until, company_id, created_by, rotation_strategy"


def _row_to_token(r: dict) -> QRToken:
    return QRToken(
        qr_code_id=int(r["qr_code_id"]),
        code=r["code"],
        valid_from=from_db_datetime(r["valid_from"]),
        valid_until=from_db_datetime(r["valid_until"]),
        company_id=int(r["company_id"]),
        created_by=r.get("created_by"),
        rotation_strategy=RotationStrategy(r["rotation_strategy"]),
    )


class MySQLQRCodeRepository(QRCodeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_valid(self, *, code: str, company_id: int, at: datetime) -> Optional[QRToken]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM qr_codes
                WHERE code=%s AND company_id=%s AND valid_from<=%s AND valid_until>=%s
                LIMIT 1
                """,
                (code, int(company_id), to_db_datetime(at), to_db_datetime(at)),
            )
            r = fetchone(cur)
            return _row_to_token(r) if r else None

    def find_by_code(self, *, code: str, company_id: int) -> Optional[QRToken]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM qr_codes
                WHERE code=%s AND company_id=%s
                LIMIT 1
                """,
                (code, int(company_id)),
            )
            r = fetchone(cur)
            return _row_to_token(r) if r else None

    def latest_valid_for_company(self, company_id: int, at: datetime) -> Optional[QRToken]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM qr_codes
                WHERE company_id=%s AND valid_from<=%s AND valid_until>=%s
                ORDER BY valid_from DESC, qr_code_id DESC
                LIMIT 1
                """,
                (int(company_id), to_db_datetime(at), to_db_datetime(at)),
            )
            r = fetchone(cur)
            return _row_to_token(r) if r else None

    def create_token(
        self,
        *,
        code: str,
        valid_from: datetime,
        valid_until: datetime,
        company_id: int,
        created_by: Optional[int],
        rotation_strategy: RotationStrategy,
    ) -> QRToken:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO qr_codes(code, valid_from, valid_until, company_id, created_by, rotation_strategy)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    code,
                    to_db_datetime(valid_from),
                    to_db_datetime(valid_until),
                    int(company_id),
                    created_by,
                    rotation_strategy.value,
                ),
            )
            qr_code_id = int(cur.lastrowid)
        return QRToken(
            qr_code_id=qr_code_id,
            code=code,
            valid_from=valid_from,
            valid_until=valid_until,
            company_id=int(company_id),
            created_by=created_by,
            rotation_strategy=rotation_strategy,
        )
