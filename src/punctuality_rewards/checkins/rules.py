from __future__ import annotations

from dataclasses import dataclass, field

from ..core import constants


@dataclass(frozen=True)
class CheckInRules:
    """Tunable check-in rules.

    Minutes are counted from civil midnight in the company timezone. The window
    is half-open: ``window_end_hour`` itself is already outside it.
    """

    window_start_hour: int = constants.DEFAULT_WINDOW_START_HOUR
    window_end_hour: int = constants.DEFAULT_WINDOW_END_HOUR
    early_cutoff_minutes: int = constants.EARLY_CUTOFF_MINUTES
    ontime_cutoff_minutes: int = constants.ONTIME_CUTOFF_MINUTES
    early_points: int = constants.EARLY_POINTS
    ontime_points: int = constants.ONTIME_POINTS
    late_points: int = constants.LATE_POINTS
    streak_lookback_days: int = constants.STREAK_LOOKBACK_DAYS
    streak_lookback_limit: int = constants.STREAK_LOOKBACK_LIMIT
    streak_milestones: dict = field(default_factory=lambda: dict(constants.STREAK_MILESTONES))
    default_utc_offset_minutes: int = constants.DEFAULT_UTC_OFFSET_MINUTES

    @classmethod
    def from_settings(cls, settings) -> "CheckInRules":
        return cls(
            window_start_hour=int(getattr(settings, "CHECKIN_WINDOW_START_HOUR", constants.DEFAULT_WINDOW_START_HOUR)),
            window_end_hour=int(getattr(settings, "CHECKIN_WINDOW_END_HOUR", constants.DEFAULT_WINDOW_END_HOUR)),
            default_utc_offset_minutes=int(
                getattr(settings, "DEFAULT_UTC_OFFSET_MINUTES", constants.DEFAULT_UTC_OFFSET_MINUTES)
            ),
        )

    def in_window(self, hour: int) -> bool:
        return self.window_start_hour <= hour < self.window_end_hour
