from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from ..core.enums import RotationStrategy
from .model import QRToken


class QRCodeRepository(Protocol):
    def find_valid(self, *, code: str, company_id: int, at: datetime) -> Optional[QRToken]:
        """Token with this code and company whose window contains ``at`` (inclusive)."""
        raise NotImplementedError

    def find_by_code(self, *, code: str, company_id: int) -> Optional[QRToken]:
        raise NotImplementedError

    def latest_valid_for_company(self, company_id: int, at: datetime) -> Optional[QRToken]:
        raise NotImplementedError

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
        raise NotImplementedError
