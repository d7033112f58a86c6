"""Business constants and defaults."""

from datetime import timedelta, timezone

# Business timezone (Asia/Dhaka) as a fixed offset, never the host zone.
APP_TZ = timezone(timedelta(hours=6), "Asia/Dhaka")

DEFAULT_SESSION_HOURS = 24
DEFAULT_RATE_LIMIT_PER_MINUTE = 30

DAYS_PER_MONTH = 30
DEFAULT_WORK_HOURS = 8.0
TIFFIN_OT_HOURS = 5
NIGHT_OT_HOURS = 7

DEFAULT_MEDICAL = 750.0
DEFAULT_TRANSPORT = 450.0
DEFAULT_FOOD = 1250.0

# Gross salary split used by the salary components helper.
FIXED_ALLOWANCES_TOTAL = DEFAULT_MEDICAL + DEFAULT_TRANSPORT + DEFAULT_FOOD
BASIC_DIVISOR = 1.5
HOUSE_RENT_RATIO = 0.5
OT_RATE_DIVISOR = 104

USER_ID_PATTERN = r"^[A-Za-z0-9_-]{3,20}$"
MIN_PASSWORD_LENGTH = 6
MAX_TEXT_LENGTH = 200
MAX_NAME_LENGTH = 100

# Partition (sheet) names
USERS_PARTITION = "Users"
PROFILES_PARTITION = "Profiles"
SESSIONS_PARTITION = "Sessions"
ATTENDANCE_PREFIX = "Attendance_"
