"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
MIN_PASSWORD_LENGTH = 6
DEMO_PASSWORD = "password"
DEFAULT_CURRENCY = "USD"
MAX_GOAL_PROGRESS = 100
STANDARD_WORKDAY_MINUTES = 8 * 60
