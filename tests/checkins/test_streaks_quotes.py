import random
from datetime import date, timedelta

from punctuality_rewards.checkins.model import Quote
from punctuality_rewards.checkins.quotes import QUOTES, pick_quote
from punctuality_rewards.checkins.rules import CheckInRules
from punctuality_rewards.checkins.streaks import milestone_for, trailing_streak
from punctuality_rewards.core.enums import CheckInType

TODAY = date(2026, 2, 2)


def _run(length, *, end=TODAY):
    return [end - timedelta(days=i) for i in range(length)]


def test_trailing_streak_seeds_at_one():
    assert trailing_streak(TODAY, [TODAY]) == 1
    assert trailing_streak(TODAY, []) == 1


def test_trailing_streak_counts_consecutive_days():
    assert trailing_streak(TODAY, _run(7)) == 7


def test_trailing_streak_stops_at_gap_without_reset():
    days = _run(3) + _run(5, end=TODAY - timedelta(days=5))
    assert trailing_streak(TODAY, days) == 3


def test_trailing_streak_stops_on_same_day_entry():
    assert trailing_streak(TODAY, [TODAY, TODAY, TODAY - timedelta(days=1)]) == 1


def test_milestones_are_exact_matches():
    milestones = CheckInRules().streak_milestones

    assert milestone_for(7, milestones) == (5, "7-day streak bonus!")
    assert milestone_for(10, milestones) == (10, "10-day streak bonus!")
    assert milestone_for(30, milestones) == (25, "30-day streak bonus! Amazing consistency!")
    for streak in (1, 6, 8, 9, 11, 29, 31):
        assert milestone_for(streak, milestones) is None


def test_three_quotes_per_type():
    for check_in_type in CheckInType:
        assert len(QUOTES[check_in_type]) == 3


def test_pick_quote_is_seedable():
    first = pick_quote(CheckInType.LATE, random.Random(7))
    second = pick_quote(CheckInType.LATE, random.Random(7))

    assert first == second
    assert first in QUOTES[CheckInType.LATE]


def test_pick_quote_without_entries_returns_none():
    assert pick_quote(CheckInType.EARLY, quotes={}) is None
    assert pick_quote(CheckInType.EARLY, quotes={CheckInType.EARLY: ()}) is None


def test_quote_serializes_text_and_author():
    quote = Quote("Well begun is half done.", "Aristotle")
    assert quote.text == "Well begun is half done."
    assert quote.author == "Aristotle"
