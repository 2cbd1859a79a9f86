from datetime import date, datetime, timedelta, timezone

import pytest

from punctuality_rewards.common.civil_time import CivilCalendar
from punctuality_rewards.common.clock import FixedClock, as_utc
from punctuality_rewards.companies.model import Company
from punctuality_rewards.core.enums import Capability, Role
from punctuality_rewards.core.exceptions import ValidationError
from punctuality_rewards.core.results import Failure
from punctuality_rewards.common.validators import optional_text, require_positive_int


def test_fixed_offset_day_bounds():
    calendar = CivilCalendar.fixed_offset(-420)

    start, end = calendar.day_bounds(date(2026, 2, 2))

    assert start == datetime(2026, 2, 2, 7, 0, tzinfo=timezone.utc)
    assert end == datetime(2026, 2, 3, 6, 59, 59, 999999, tzinfo=timezone.utc)


def test_civil_day_and_minute_of_day():
    calendar = CivilCalendar.fixed_offset(-420)
    instant = datetime(2026, 2, 2, 14, 46, tzinfo=timezone.utc)

    assert calendar.civil_day(instant) == date(2026, 2, 2)
    assert calendar.minute_of_day(instant) == 7 * 60 + 46
    assert calendar.civil_day(instant - timedelta(hours=8)) == date(2026, 2, 1)


def test_for_company_fallbacks():
    default = CivilCalendar.for_company(None, default_offset_minutes=-420)
    explicit = CivilCalendar.for_company(Company(1, "Acme", utc_offset_minutes=60), default_offset_minutes=-420)
    unset = CivilCalendar.for_company(Company(2, "Globex"), default_offset_minutes=-420)

    assert default.tz.utcoffset(None) == timedelta(minutes=-420)
    assert explicit.tz.utcoffset(None) == timedelta(minutes=60)
    assert unset.tz.utcoffset(None) == timedelta(minutes=-420)


def test_named_zone_day_is_shorter_on_spring_forward():
    calendar = CivilCalendar.for_company(
        Company(1, "Acme", timezone_name="America/Denver"), default_offset_minutes=0
    )

    start, end = calendar.day_bounds(date(2026, 3, 8))

    assert end - start == timedelta(hours=23) - timedelta(microseconds=1)


def test_naive_datetimes_are_treated_as_utc():
    naive = datetime(2026, 2, 2, 8, 0)
    assert as_utc(naive) == datetime(2026, 2, 2, 8, 0, tzinfo=timezone.utc)
    assert FixedClock(naive).now().tzinfo == timezone.utc


@pytest.mark.parametrize(
    "value, expected",
    [
        ("admin", Role.ADMIN),
        (" Super_Admin ", Role.SUPER_ADMIN),
        (Role.EMPLOYEE, Role.EMPLOYEE),
        ("administrator", Role.EMPLOYEE),
        ("not-an-admin", Role.EMPLOYEE),
        (None, Role.EMPLOYEE),
    ],
)
def test_role_parse_is_exact(value, expected):
    assert Role.parse(value) == expected


def test_role_capabilities():
    assert Role.ADMIN.supports(Capability.VIEW_ANY_STATS)
    assert Role.SUPER_ADMIN.supports(Capability.MANAGE_QR_CODES)
    assert not Role.EMPLOYEE.supports(Capability.MANAGE_REDEMPTIONS)


def test_failure_from_error_keeps_kind_and_status():
    failure = Failure.from_error(ValidationError("QR code is required"))

    assert failure.to_dict() == {"success": False, "error": "InvalidRequest", "message": "QR code is required"}
    assert failure.status_code == 400
    assert not failure.retriable


def test_validators():
    assert require_positive_int("3", "reward_id") == 3
    with pytest.raises(ValidationError):
        require_positive_int("abc", "reward_id")
    with pytest.raises(ValidationError):
        require_positive_int(0, "reward_id")
    assert optional_text("  ") is None
    assert optional_text(" HQ ") == "HQ"
