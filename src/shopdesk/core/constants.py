"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DAY_SHIFT_START_HOUR = 8
DAY_SHIFT_END_HOUR = 18
EVENING_SHIFT_START_HOUR = 18
EVENING_SHIFT_END_HOUR = 22

# Events at or after this hour belong to the evening shift.
EVENING_CUTOFF_HOUR = 12

DEFAULT_HISTORY_LIMIT = 30
DEFAULT_STATS_DAYS = 30
CONFLICT_RETRY_ATTEMPTS = 3

QR_PAYLOAD_PREFIX = "employee:"
