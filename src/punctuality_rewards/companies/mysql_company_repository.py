from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Company
from .repository import CompanyRepository


class MySQLCompanyRepository(CompanyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, company_id: int) -> Optional[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT company_id, name, utc_offset_minutes, timezone_name
                FROM companies
                WHERE company_id=%s
                """,
                (int(company_id),),
            )
            row = fetchone(cur)
            if not row:
                return None
            offset = row.get("utc_offset_minutes")
            return Company(
                company_id=int(row["company_id"]),
                name=row["name"],
                utc_offset_minutes=int(offset) if offset is not None else None,
                timezone_name=row.get("timezone_name") or None,
            )
