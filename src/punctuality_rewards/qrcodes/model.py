from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import RotationStrategy


@dataclass(frozen=True)
class QRToken:
    """A check-in code scoped to one company and a validity window."""

    qr_code_id: int
    code: str
    valid_from: datetime
    valid_until: datetime
    company_id: int
    created_by: Optional[int] = None
    rotation_strategy: RotationStrategy = RotationStrategy.DAILY

    def is_valid_at(self, instant: datetime) -> bool:
        return self.valid_from <= instant <= self.valid_until

    def to_dict(self) -> dict:
        return {
            "id": self.qr_code_id,
            "code": self.code,
            "valid_from": self.valid_from.isoformat(),
            "valid_until": self.valid_until.isoformat(),
            "company_id": self.company_id,
            "rotation_strategy": self.rotation_strategy.value,
        }
