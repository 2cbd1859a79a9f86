from __future__ import annotations

from dataclasses import dataclass

from .rules import CheckInRules
from .strategies.base import ScoringStrategy
from .strategies.early_strategy import EarlyStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.ontime_strategy import OnTimeStrategy


@dataclass
class CheckInStrategyFactory:
    """Factory Pattern: choose the scoring strategy from the civil minute of day."""

    def for_minute(self, *, minute_of_day: int, rules: CheckInRules) -> ScoringStrategy:
        if minute_of_day <= rules.early_cutoff_minutes:
            return EarlyStrategy()
        if minute_of_day <= rules.ontime_cutoff_minutes:
            return OnTimeStrategy()
        return LateStrategy()
