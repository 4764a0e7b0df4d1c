"""Attendance-to-payroll calculation engine.

Pure functions only: the engine takes one employee-day (punch pair, resolved
shift, 7th-day flag) and returns a :class:`DayResult`. No I/O, no shared state.
"""

from __future__ import annotations

from typing import Optional

from ..attendance.lateness import calculate_effective_check_in
from ..common.time_utils import time_to_minutes
from .calculator.factory import DayCalculatorFactory, classify_day
from .model import DayContext, DayResult
from .policy import DEFAULT_POLICY, PayrollPolicy

_FACTORY = DayCalculatorFactory()


def build_day_context(
    actual_check_in: str,
    actual_check_out: str,
    shift_check_in: str,
    shift_check_out: str,
    enable_overtime: bool,
    policy: PayrollPolicy = DEFAULT_POLICY,
) -> DayContext:
    late = calculate_effective_check_in(actual_check_in, shift_check_in, policy)
    return DayContext(
        actual_check_in=time_to_minutes(actual_check_in),
        actual_check_out=time_to_minutes(actual_check_out),
        shift_check_in=time_to_minutes(shift_check_in),
        shift_check_out=time_to_minutes(shift_check_out),
        enable_overtime=bool(enable_overtime),
        effective_check_in=late.effective_check_in,
        late_tier=late.tier,
        is_late_warning=late.is_late_warning,
    )


def calculate_work_days_and_ot(
    actual_check_in: str,
    actual_check_out: str,
    shift_check_in: str,
    shift_check_out: str,
    is_holiday: bool,
    is_consecutive_day_7: bool,
    enable_overtime: bool = False,
    *,
    policy: PayrollPolicy = DEFAULT_POLICY,
    factory: Optional[DayCalculatorFactory] = None,
) -> DayResult:
    """Work-day credit, overtime and lunch-break overtime for one day.

    The day is classified once (7th consecutive day, then holiday, then
    regular) and handed to the matching calculator.
    """
    ctx = build_day_context(
        actual_check_in,
        actual_check_out,
        shift_check_in,
        shift_check_out,
        enable_overtime,
        policy,
    )
    kind = classify_day(is_holiday=is_holiday, is_consecutive_day_7=is_consecutive_day_7)
    return (factory or _FACTORY).for_kind(kind).calculate(ctx, policy)
