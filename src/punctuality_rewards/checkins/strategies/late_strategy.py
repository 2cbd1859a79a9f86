from __future__ import annotations

from ...core.enums import CheckInType
from ..rules import CheckInRules
from .base import ScoreDecision, ScoringStrategy


class LateStrategy(ScoringStrategy):
    """Late check-in."""

    def score(self, *, rules: CheckInRules) -> ScoreDecision:
        return ScoreDecision(
            check_in_type=CheckInType.LATE,
            points=rules.late_points,
            message="You made it! Keep improving",
        )
