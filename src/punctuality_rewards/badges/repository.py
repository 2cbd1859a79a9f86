from __future__ import annotations

from typing import Protocol, Sequence

from .model import UserBadge


class BadgeRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[UserBadge]:
        raise NotImplementedError
