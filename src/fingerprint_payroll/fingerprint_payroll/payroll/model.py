from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DayKind, LateTier


@dataclass(frozen=True)
class DayContext:
    """Inputs of one employee-day, times already in minutes since midnight."""

    actual_check_in: int
    actual_check_out: int
    shift_check_in: int
    shift_check_out: int
    enable_overtime: bool
    effective_check_in: str
    late_tier: LateTier
    is_late_warning: bool

    @property
    def work_end(self) -> int:
        """Checkout counted for pay: capped at the shift end unless overtime is enabled."""
        if self.enable_overtime:
            return self.actual_check_out
        return min(self.actual_check_out, self.shift_check_out)


@dataclass(frozen=True)
class DayResult:
    """Computed work-day credit and overtime of one employee-day.

    All numbers are rounded to 1 decimal place.
    """

    work_days: float
    work_hours: float
    ot_hours: float
    lunch_break_ot: float
    effective_check_in: str
    is_late_warning: bool
    day_kind: DayKind = DayKind.REGULAR
    late_tier: LateTier = LateTier.ON_TIME

    @property
    def is_late(self) -> bool:
        return self.late_tier == LateTier.LATE
