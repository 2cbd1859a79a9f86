import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "punctuality_rewards"),
}

# Base URL encoded into printed QR codes; the code is appended as the last path segment
CHECKIN_URL_BASE = os.getenv("CHECKIN_URL_BASE", "http://localhost:5000/checkin")

# Check-in rules (company timezone is configured per company, this is the fallback)
CHECKIN_WINDOW_START_HOUR = int(os.getenv("CHECKIN_WINDOW_START_HOUR", "6"))
CHECKIN_WINDOW_END_HOUR = int(os.getenv("CHECKIN_WINDOW_END_HOUR", "9"))
DEFAULT_UTC_OFFSET_MINUTES = int(os.getenv("DEFAULT_UTC_OFFSET_MINUTES", "-420"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
