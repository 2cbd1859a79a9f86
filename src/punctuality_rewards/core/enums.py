from __future__ import annotations

from enum import Enum


class Capability(str, Enum):
    """Permissions checked by the services instead of comparing role names."""

    VIEW_ANY_STATS = "view_any_stats"
    MANAGE_REDEMPTIONS = "manage_redemptions"
    MANAGE_QR_CODES = "manage_qr_codes"


class Role(str, Enum):
    """User role used for authorization."""

    EMPLOYEE = "employee"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"

    @classmethod
    def parse(cls, value) -> "Role":
        if isinstance(value, Role):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.EMPLOYEE

    def supports(self, capability: Capability) -> bool:
        return capability in _ROLE_CAPABILITIES[self]


_ADMIN_CAPABILITIES = frozenset(
    {Capability.VIEW_ANY_STATS, Capability.MANAGE_REDEMPTIONS, Capability.MANAGE_QR_CODES}
)

_ROLE_CAPABILITIES = {
    Role.EMPLOYEE: frozenset(),
    Role.ADMIN: _ADMIN_CAPABILITIES,
    Role.SUPER_ADMIN: _ADMIN_CAPABILITIES,
}


class UserStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SUSPENDED = "suspended"


class CheckInType(str, Enum):
    """Punctuality classification stored with every check-in."""

    EARLY = "early"
    ONTIME = "ontime"
    LATE = "late"


class RedemptionStatus(str, Enum):
    """Approval flow of a reward redemption."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    FULFILLED = "fulfilled"

    @property
    def counts_as_spent(self) -> bool:
        return self is not RedemptionStatus.REJECTED


class RewardCategory(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUAL = "annual"


class RotationStrategy(str, Enum):
    """How long a freshly issued QR token stays valid."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    MANUAL = "manual"


class ErrorKind(str, Enum):
    """Machine-readable failure kinds returned across the service boundary."""

    INVALID_REQUEST = "InvalidRequest"
    OUTSIDE_WINDOW = "OutsideWindow"
    DUPLICATE_CHECK_IN = "DuplicateCheckIn"
    INVALID_TOKEN = "InvalidToken"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    PROCESSING_FAILED = "ProcessingFailed"
