from __future__ import annotations

from ...common.time_utils import minutes_to_hours, round_one_decimal
from ...core.enums import DayKind
from ..model import DayContext, DayResult
from ..policy import PayrollPolicy
from .base import DayCalculator, scheduled_span


class ConsecutiveDayCalculator(DayCalculator):
    """7th consecutive work day: every hour worked after lunch is overtime."""

    def calculate(self, ctx: DayContext, policy: PayrollPolicy) -> DayResult:
        span = scheduled_span(ctx, policy)
        lunch_break_ot = policy.lunch_break_ot_hours if span.net_minutes >= policy.standard_work_minutes else 0.0

        return DayResult(
            work_days=0.0,
            work_hours=0.0,
            ot_hours=round_one_decimal(minutes_to_hours(span.net_minutes)),
            lunch_break_ot=round_one_decimal(lunch_break_ot),
            effective_check_in=ctx.effective_check_in,
            is_late_warning=ctx.is_late_warning,
            day_kind=DayKind.CONSECUTIVE_SEVENTH,
            late_tier=ctx.late_tier,
        )
