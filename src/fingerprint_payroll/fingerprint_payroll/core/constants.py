"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STANDARD_WORK_HOURS = 8
LUNCH_BREAK_DEDUCTION_HOURS = 1
LUNCH_BREAK_OT_HOURS = 0.5
LUNCH_WINDOW_START = "12:00"
LUNCH_WINDOW_END = "13:00"

LATE_THRESHOLD_MINUTES = 10
LATE_WARNING_LIMIT_MINUTES = 40
LATE_ROUND_UP_MINUTES = 30
LATE_LUNCH_RESTORE_HOURS = 0.5

OT_THRESHOLD_MINUTES = 30
OT_ROUNDING_MINUTES = 30

CONSECUTIVE_DAYS_FOR_OT = 7

DEFAULT_CHECK_IN = "08:00"
DEFAULT_CHECK_OUT = "17:00"

GOOD_RATING_MAX_LATE_PERCENTAGE = 10
