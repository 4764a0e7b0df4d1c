from __future__ import annotations

from dataclasses import dataclass

from ..common.time_utils import minutes_to_time, time_to_minutes
from ..core.enums import LateTier
from ..payroll.policy import DEFAULT_POLICY, PayrollPolicy


@dataclass(frozen=True)
class EffectiveCheckIn:
    effective_check_in: str
    tier: LateTier
    is_late: bool = False
    is_late_warning: bool = False


def calculate_effective_check_in(
    actual_check_in: str,
    shift_check_in: str,
    policy: PayrollPolicy = DEFAULT_POLICY,
) -> EffectiveCheckIn:
    """Map an actual check-in onto the check-in used for pay.

    Tiers, upper bounds inclusive:

    - at or before the shift start, or within the grace period: shift start;
    - up to the warning limit: shift start plus the round-up block, with a
      late warning but not marked late;
    - beyond that: the top of the hour following the actual arrival
      (08:41 -> 09:00), marked late.
    """
    actual_minutes = time_to_minutes(actual_check_in)
    shift_minutes = time_to_minutes(shift_check_in)
    late_minutes = actual_minutes - shift_minutes

    if late_minutes <= 0:
        return EffectiveCheckIn(effective_check_in=shift_check_in, tier=LateTier.ON_TIME)

    if late_minutes <= policy.late_threshold_minutes:
        return EffectiveCheckIn(effective_check_in=shift_check_in, tier=LateTier.GRACE)

    if late_minutes <= policy.late_warning_limit_minutes:
        return EffectiveCheckIn(
            effective_check_in=minutes_to_time(shift_minutes + policy.late_round_up_minutes),
            tier=LateTier.WARNING,
            is_late_warning=True,
        )

    next_hour = (actual_minutes // 60 + 1) * 60
    return EffectiveCheckIn(
        effective_check_in=minutes_to_time(next_hour),
        tier=LateTier.LATE,
        is_late=True,
    )


def is_late_for_ranking(check_in: str, shift_check_in: str, policy: PayrollPolicy = DEFAULT_POLICY) -> bool:
    """Ranking counts a day as late once the grace period is exceeded."""
    return time_to_minutes(check_in) - time_to_minutes(shift_check_in) > policy.late_threshold_minutes
