from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role, UserStatus


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Owned by the external auth layer, this package only reads it.
    """

    user_id: int
    name: str
    email: str
    role: Role
    company_id: Optional[int]
    department_id: Optional[int] = None
    status: UserStatus = UserStatus.APPROVED
