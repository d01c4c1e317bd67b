"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Storage document keys
ACCOUNTS_KEY = "accounts"
PAY_SETTINGS_KEY = "paySettings"
LOGS_KEY = "logs"
OPEN_PUNCHES_KEY = "currentPunch"

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin"
DEFAULT_START_DAYS = (1, 15)

DEFAULT_SHIFT_START = "09:00"
DEFAULT_SHIFT_END = "17:00"

MIN_START_DAY = 1
MAX_START_DAY = 31

EXPORT_HEADER = ("Pay Period Start", "Employee", "Total Hours", "Total Pay")
EXPORT_FILENAME = "timekeeper_summary.csv"
