from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Company:
    company_id: int
    name: str
    utc_offset_minutes: Optional[int] = None
    timezone_name: Optional[str] = None
