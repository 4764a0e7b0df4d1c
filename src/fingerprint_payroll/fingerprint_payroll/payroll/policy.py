from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from ..common.time_utils import time_to_minutes
from ..common.validators import require_non_negative, require_positive, require_time_string
from ..core import constants as c
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class PayrollPolicy:
    """Business thresholds used by the attendance-to-payroll engine.

    Defaults reproduce the standard rules; settings modules may override any
    field through their ``PAYROLL_POLICY`` mapping.
    """

    standard_work_hours: int = c.STANDARD_WORK_HOURS
    lunch_break_deduction_hours: int = c.LUNCH_BREAK_DEDUCTION_HOURS
    lunch_break_ot_hours: float = c.LUNCH_BREAK_OT_HOURS
    lunch_window_start: str = c.LUNCH_WINDOW_START
    lunch_window_end: str = c.LUNCH_WINDOW_END

    late_threshold_minutes: int = c.LATE_THRESHOLD_MINUTES
    late_warning_limit_minutes: int = c.LATE_WARNING_LIMIT_MINUTES
    late_round_up_minutes: int = c.LATE_ROUND_UP_MINUTES
    late_lunch_restore_hours: float = c.LATE_LUNCH_RESTORE_HOURS

    ot_threshold_minutes: int = c.OT_THRESHOLD_MINUTES
    ot_rounding_minutes: int = c.OT_ROUNDING_MINUTES

    consecutive_days_for_ot: int = c.CONSECUTIVE_DAYS_FOR_OT
    good_rating_max_late_percentage: float = c.GOOD_RATING_MAX_LATE_PERCENTAGE

    def __post_init__(self) -> None:
        require_positive(self.standard_work_hours, "standard_work_hours")
        require_non_negative(self.lunch_break_deduction_hours, "lunch_break_deduction_hours")
        require_non_negative(self.lunch_break_ot_hours, "lunch_break_ot_hours")
        require_time_string(self.lunch_window_start, "lunch_window_start")
        require_time_string(self.lunch_window_end, "lunch_window_end")
        require_non_negative(self.late_threshold_minutes, "late_threshold_minutes")
        require_non_negative(self.late_round_up_minutes, "late_round_up_minutes")
        require_non_negative(self.late_lunch_restore_hours, "late_lunch_restore_hours")
        require_non_negative(self.ot_threshold_minutes, "ot_threshold_minutes")
        require_positive(self.ot_rounding_minutes, "ot_rounding_minutes")
        require_positive(self.consecutive_days_for_ot, "consecutive_days_for_ot")
        require_non_negative(self.good_rating_max_late_percentage, "good_rating_max_late_percentage")

        if self.late_warning_limit_minutes < self.late_threshold_minutes:
            raise ConfigurationError("late_warning_limit_minutes must not be below late_threshold_minutes")
        if time_to_minutes(self.lunch_window_start) >= time_to_minutes(self.lunch_window_end):
            raise ConfigurationError("lunch_window_start must be before lunch_window_end")

    @property
    def standard_work_minutes(self) -> int:
        return int(self.standard_work_hours * 60)

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any]) -> "PayrollPolicy":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigurationError(f"Unknown payroll policy keys: {', '.join(unknown)}")
        return cls(**dict(overrides))

    @classmethod
    def from_settings(cls, settings: Any) -> "PayrollPolicy":
        return cls.from_mapping(getattr(settings, "PAYROLL_POLICY", None) or {})


DEFAULT_POLICY = PayrollPolicy()
