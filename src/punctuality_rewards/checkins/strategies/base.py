from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import CheckInType
from ..rules import CheckInRules


@dataclass(frozen=True)
class ScoreDecision:
    check_in_type: CheckInType
    points: int
    message: str


class ScoringStrategy(ABC):
    """Strategy Pattern: encapsulate how a check-in is classified and scored."""

    @abstractmethod
    def score(self, *, rules: CheckInRules) -> ScoreDecision:
        raise NotImplementedError
