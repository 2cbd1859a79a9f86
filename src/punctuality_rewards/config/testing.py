import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "punctuality_rewards_test"),
}

CHECKIN_URL_BASE = "https://punctuality.example.com/checkin"

CHECKIN_WINDOW_START_HOUR = 6
CHECKIN_WINDOW_END_HOUR = 9
DEFAULT_UTC_OFFSET_MINUTES = -420

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
