"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_UTC_OFFSET_MINUTES = -7 * 60
DEFAULT_WINDOW_START_HOUR = 6
DEFAULT_WINDOW_END_HOUR = 9

EARLY_CUTOFF_MINUTES = 7 * 60 + 45
ONTIME_CUTOFF_MINUTES = 8 * 60

EARLY_POINTS = 2
ONTIME_POINTS = 1
LATE_POINTS = 0

STREAK_LOOKBACK_DAYS = 30
STREAK_LOOKBACK_LIMIT = 30

# streak length -> (bonus points, reason)
STREAK_MILESTONES = {
    7: (5, "7-day streak bonus!"),
    10: (10, "10-day streak bonus!"),
    30: (25, "30-day streak bonus! Amazing consistency!"),
}

STATS_HISTORY_LIMIT = 100
STATS_RECENT_LIMIT = 10
WEEK_DAYS = 7
MONTH_DAYS = 30
QUARTER_DAYS = 90

DEFAULT_CHECKIN_URL_BASE = "https://punctuality.example.com/checkin"
