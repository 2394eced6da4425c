"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
MAX_GENERATION_DAYS = 366

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
