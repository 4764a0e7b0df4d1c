from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.time_utils import truncate_to_minute
from ..core.constants import DEFAULT_CHECK_IN, DEFAULT_CHECK_OUT


@dataclass(frozen=True)
class Shift:
    """Domain entity: a configured work schedule for one date.

    Times are stored with second precision (``HH:MM:SS``).
    """

    shift_id: int
    work_date: str
    check_in: str
    check_out: str
    is_holiday: bool = False
    enable_overtime: bool = False
    name: Optional[str] = None

    def to_times(self) -> "ShiftTimes":
        return ShiftTimes(
            check_in=truncate_to_minute(self.check_in),
            check_out=truncate_to_minute(self.check_out),
            is_holiday=self.is_holiday,
            enable_overtime=self.enable_overtime,
        )


@dataclass(frozen=True)
class ShiftTimes:
    """Shift as consumed by the engine, times truncated to ``HH:MM``."""

    check_in: str = DEFAULT_CHECK_IN
    check_out: str = DEFAULT_CHECK_OUT
    is_holiday: bool = False
    enable_overtime: bool = False


DEFAULT_SHIFT = ShiftTimes()
