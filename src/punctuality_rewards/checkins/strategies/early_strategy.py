from __future__ import annotations

from ...core.enums import CheckInType
from ..rules import CheckInRules
from .base import ScoreDecision, ScoringStrategy


class EarlyStrategy(ScoringStrategy):
    """Arrived at or before the early cutoff."""

    def score(self, *, rules: CheckInRules) -> ScoreDecision:
        return ScoreDecision(
            check_in_type=CheckInType.EARLY,
            points=rules.early_points,
            message=f"Early bird! +{rules.early_points} points",
        )
