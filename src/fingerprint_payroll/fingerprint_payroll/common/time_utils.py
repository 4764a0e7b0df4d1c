from __future__ import annotations

import math


def time_to_minutes(value: str) -> int:
    """Convert ``HH:MM`` or ``HH:MM:SS`` into minutes since midnight.

    Seconds are ignored and no range check is done.
    """
    hour, minute = value.split(":")[:2]
    return int(hour) * 60 + int(minute)


def minutes_to_time(minutes: int) -> str:
    """Convert minutes into zero-padded ``HH:MM``.

    There is no wraparound at midnight: 1500 minutes renders as ``25:00``.
    """
    hours, mins = divmod(int(minutes), 60)
    return f"{hours:02d}:{mins:02d}"


def minutes_to_hours(minutes: float) -> float:
    return minutes / 60


def truncate_to_minute(value: str) -> str:
    """Drop the seconds part: ``08:05:59`` -> ``08:05``."""
    hour, minute = value.split(":")[:2]
    return f"{hour}:{minute}"


def round_one_decimal(value: float) -> float:
    """Round half-up to 1 decimal place (2.25 -> 2.3, 0.875 -> 0.9)."""
    return math.floor(value * 10 + 0.5) / 10
