from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...common.time_utils import time_to_minutes
from ..model import DayContext, DayResult
from ..policy import PayrollPolicy


def calculate_lunch_break_hours(work_start: int, work_end: int, policy: PayrollPolicy) -> int:
    """Lunch hours to deduct when ``[work_start, work_end)`` overlaps the lunch window."""
    lunch_start = time_to_minutes(policy.lunch_window_start)
    lunch_end = time_to_minutes(policy.lunch_window_end)
    if work_start < lunch_end and work_end > lunch_start:
        return policy.lunch_break_deduction_hours
    return 0


@dataclass(frozen=True)
class ScheduledSpan:
    """Minutes worked from the scheduled shift start, before and after lunch."""

    raw_minutes: int
    net_minutes: int


def scheduled_span(ctx: DayContext, policy: PayrollPolicy) -> ScheduledSpan:
    """Span used by holiday and 7th-day pay.

    Starts at the scheduled check-in whatever the actual arrival; lunch is
    deducted once the span reaches a standard work day.
    """
    raw = ctx.work_end - ctx.shift_check_in
    net = raw
    if raw >= policy.standard_work_minutes:
        net -= policy.lunch_break_deduction_hours * 60
    return ScheduledSpan(raw_minutes=raw, net_minutes=net)


class DayCalculator(ABC):
    """Calculator interface (Strategy Pattern, one per day kind)."""

    @abstractmethod
    def calculate(self, ctx: DayContext, policy: PayrollPolicy) -> DayResult:
        raise NotImplementedError
