from datetime import date, datetime, timedelta, timezone

import pytest

from punctuality_rewards.bonuses.model import BonusGrant
from punctuality_rewards.checkins.model import CheckIn
from punctuality_rewards.common.civil_time import CivilCalendar
from punctuality_rewards.core.enums import CheckInType, RedemptionStatus
from punctuality_rewards.redemptions.model import RewardRedemption
from punctuality_rewards.stats.aggregator import civil_days_newest_first, compute_point_totals, compute_streaks

NOW = datetime(2026, 2, 2, 15, 0, tzinfo=timezone.utc)
TODAY = date(2026, 2, 2)


def _check_in(at, points, idx=1):
    return CheckIn(
        check_in_id=idx,
        user_id=1,
        checked_in_at=at,
        civil_day=at.date(),
        check_in_type=CheckInType.EARLY,
        points_earned=points,
        qr_code_data="SK",
    )


def _bonus(at, points):
    return BonusGrant(bonus_id=1, user_id=1, points=points, reason="bonus", awarded_by=1, created_at=at)


def _redemption(cost, status):
    return RewardRedemption(
        redemption_id=1, user_id=1, reward_id=1, points_cost=cost, status=status, created_at=NOW
    )


def test_total_subtracts_only_non_rejected_redemptions():
    check_ins = [_check_in(NOW - timedelta(days=d), p) for d, p in ((0, 2), (1, 1), (2, 0))]
    redemptions = [_redemption(50, RedemptionStatus.REJECTED), _redemption(10, RedemptionStatus.APPROVED)]

    totals = compute_point_totals(check_ins, [], redemptions, now=NOW)

    assert totals.total == -7


@pytest.mark.parametrize(
    "status, spent",
    [
        (RedemptionStatus.PENDING, True),
        (RedemptionStatus.APPROVED, True),
        (RedemptionStatus.FULFILLED, True),
        (RedemptionStatus.REJECTED, False),
    ],
)
def test_redemption_statuses_that_count_as_spent(status, spent):
    totals = compute_point_totals([], [_bonus(NOW, 20)], [_redemption(5, status)], now=NOW)
    assert totals.total == (15 if spent else 20)


def test_windows_are_independent_and_inclusive():
    items = [
        _check_in(NOW - timedelta(days=7), 1),
        _check_in(NOW - timedelta(days=7, seconds=1), 2),
        _check_in(NOW - timedelta(days=30), 4),
        _check_in(NOW - timedelta(days=90), 8),
        _check_in(NOW - timedelta(days=91), 16),
    ]
    bonuses = [_bonus(NOW - timedelta(days=1), 5)]

    totals = compute_point_totals(items, bonuses, [], now=NOW)

    assert totals.total == 36
    assert totals.weekly == 6
    assert totals.monthly == 12
    assert totals.quarterly == 20


def test_redemptions_are_not_bucketed():
    totals = compute_point_totals(
        [_check_in(NOW, 2)], [], [_redemption(10, RedemptionStatus.PENDING)], now=NOW
    )
    assert (totals.total, totals.weekly) == (-8, 2)


def test_streak_ending_today():
    days = [TODAY, TODAY - timedelta(days=1), TODAY - timedelta(days=2)]
    summary = compute_streaks(days, today=TODAY)
    assert (summary.current, summary.longest) == (3, 3)


def test_streak_ending_yesterday_is_still_current():
    days = [TODAY - timedelta(days=1), TODAY - timedelta(days=2)]
    summary = compute_streaks(days, today=TODAY)
    assert (summary.current, summary.longest) == (2, 2)


def test_gap_ends_current_streak_and_starts_new_candidate():
    days = [TODAY, TODAY - timedelta(days=2), TODAY - timedelta(days=3), TODAY - timedelta(days=4)]
    summary = compute_streaks(days, today=TODAY)
    assert summary.current == 0
    assert summary.longest == 3


def test_stale_history_counts_nothing():
    days = [TODAY - timedelta(days=2), TODAY - timedelta(days=3), TODAY - timedelta(days=4)]
    summary = compute_streaks(days, today=TODAY)
    assert (summary.current, summary.longest) == (0, 0)


def test_empty_history():
    summary = compute_streaks([], today=TODAY)
    assert (summary.current, summary.longest) == (0, 0)


def test_civil_days_are_sorted_newest_first_in_local_time():
    calendar = CivilCalendar.fixed_offset(-420)
    # 03:00 UTC on Feb 2 is still Feb 1 in UTC-7
    late_evening = _check_in(datetime(2026, 2, 2, 3, 0, tzinfo=timezone.utc), 0)
    morning = _check_in(datetime(2026, 2, 2, 14, 0, tzinfo=timezone.utc), 2)

    assert civil_days_newest_first([late_evening, morning], calendar) == [date(2026, 2, 2), date(2026, 2, 1)]
