from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import DayKind
from .base import DayCalculator
from .consecutive_calculator import ConsecutiveDayCalculator
from .holiday_calculator import HolidayCalculator
from .regular_calculator import RegularDayCalculator


def classify_day(*, is_holiday: bool, is_consecutive_day_7: bool) -> DayKind:
    """A 7th consecutive day outranks a holiday."""
    if is_consecutive_day_7:
        return DayKind.CONSECUTIVE_SEVENTH
    if is_holiday:
        return DayKind.HOLIDAY
    return DayKind.REGULAR


@dataclass
class DayCalculatorFactory:
    """Factory Pattern: choose the calculator for a day kind."""

    def for_kind(self, kind: DayKind) -> DayCalculator:
        if kind == DayKind.CONSECUTIVE_SEVENTH:
            return ConsecutiveDayCalculator()
        if kind == DayKind.HOLIDAY:
            return HolidayCalculator()
        return RegularDayCalculator()
