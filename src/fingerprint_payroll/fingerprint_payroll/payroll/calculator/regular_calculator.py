from __future__ import annotations

from ...common.time_utils import minutes_to_hours, round_one_decimal, time_to_minutes
from ...core.enums import DayKind, LateTier
from ..model import DayContext, DayResult
from ..policy import PayrollPolicy
from .base import DayCalculator, calculate_lunch_break_hours


def round_overtime_minutes(ot_minutes: int, policy: PayrollPolicy) -> int:
    """Drop overtime under the threshold, round the rest up to whole blocks.

    25 -> 0, 35 -> 60, 61 -> 90 with the 30-minute defaults.
    """
    if ot_minutes < policy.ot_threshold_minutes:
        return 0
    block = policy.ot_rounding_minutes
    return -(-ot_minutes // block) * block


class RegularDayCalculator(DayCalculator):
    """Regular day: pay starts from the normalized check-in.

    Three cases, checked in order:

    - overtime disabled and the shift worked to its end: a full shift is
      8 hours; a late arrival gets the lunch hour restored up to 8 hours, only
      half of it when the arrival was in the late tier;
    - net hours above the standard day: the excess is overtime;
    - otherwise: hours worked plus the lunch hour, capped at the standard day.

    Overtime is thresholded and rounded only when the shift enables overtime.
    """

    def calculate(self, ctx: DayContext, policy: PayrollPolicy) -> DayResult:
        start = time_to_minutes(ctx.effective_check_in)
        end = ctx.work_end
        standard = policy.standard_work_hours

        raw_minutes = max(0, end - start)
        lunch_hours = calculate_lunch_break_hours(start, end, policy)
        net_minutes = max(0, raw_minutes - lunch_hours * 60)
        net_hours = minutes_to_hours(net_minutes)
        lunch_ot = policy.lunch_break_ot_hours if lunch_hours else 0.0

        ot_minutes = 0
        if not ctx.enable_overtime and end == ctx.shift_check_out:
            if net_hours >= standard:
                work_hours = standard
                lunch_break_ot = lunch_ot
            else:
                restored = lunch_hours
                if ctx.late_tier == LateTier.LATE:
                    restored = min(lunch_hours, policy.late_lunch_restore_hours)
                work_hours = min(net_hours + restored, standard)
                lunch_break_ot = 0.0
        elif net_hours > standard:
            work_hours = standard
            lunch_break_ot = lunch_ot
            ot_minutes = net_minutes - policy.standard_work_minutes
        else:
            work_hours = min(net_hours + lunch_hours, standard)
            lunch_break_ot = lunch_ot if net_hours >= standard else 0.0

        if ctx.enable_overtime:
            ot_minutes = round_overtime_minutes(ot_minutes, policy)

        return DayResult(
            work_days=round_one_decimal(work_hours / standard),
            work_hours=round_one_decimal(work_hours),
            ot_hours=round_one_decimal(minutes_to_hours(ot_minutes)),
            lunch_break_ot=round_one_decimal(lunch_break_ot),
            effective_check_in=ctx.effective_check_in,
            is_late_warning=ctx.is_late_warning,
            day_kind=DayKind.REGULAR,
            late_tier=ctx.late_tier,
        )
