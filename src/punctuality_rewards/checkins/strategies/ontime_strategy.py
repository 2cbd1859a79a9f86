from __future__ import annotations

from ...core.enums import CheckInType
from ..rules import CheckInRules
from .base import ScoreDecision, ScoringStrategy


class OnTimeStrategy(ScoringStrategy):
    """Arrived after the early cutoff but not after the on-time cutoff."""

    def score(self, *, rules: CheckInRules) -> ScoreDecision:
        unit = "point" if rules.ontime_points == 1 else "points"
        return ScoreDecision(
            check_in_type=CheckInType.ONTIME,
            points=rules.ontime_points,
            message=f"Perfect timing! +{rules.ontime_points} {unit}",
        )
