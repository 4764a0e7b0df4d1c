from __future__ import annotations

from enum import Enum


class DayKind(str, Enum):
    """Day classification, computed once per employee-day."""

    REGULAR = "REGULAR"
    HOLIDAY = "HOLIDAY"
    CONSECUTIVE_SEVENTH = "CONSECUTIVE_SEVENTH"


class LateTier(str, Enum):
    """Lateness tier of a check-in relative to the scheduled shift start."""

    ON_TIME = "ON_TIME"
    GRACE = "GRACE"
    WARNING = "WARNING"
    LATE = "LATE"


class AttendanceRating(str, Enum):
    GOOD = "GOOD"
    NEEDS_IMPROVEMENT = "NEEDS_IMPROVEMENT"


class PeriodFilter(str, Enum):
    """Report period selector used by dashboard and ranking reports."""

    ALL = "all"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"
