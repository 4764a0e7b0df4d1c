from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from functools import cmp_to_key
from typing import Optional, Union

from ..attendance.model import DailyPunches
from ..attendance.punches import get_check_in_check_out, group_punches
from ..attendance.repository import PunchRepository
from ..common.time_utils import round_one_decimal
from ..common.validators import require_date_range
from ..employees.model import Employee
from ..employees.ordering import compare_fingerprints
from ..employees.repository import EmployeeRepository
from ..shifts.model import ShiftTimes
from ..shifts.repository import ShiftRepository
from ..shifts.resolver import build_shift_map, collect_assigned_shifts, get_shift_for_employee
from .calculator.factory import DayCalculatorFactory
from .engine import calculate_work_days_and_ot
from .model import DayResult
from .policy import DEFAULT_POLICY, PayrollPolicy
from .streak import is_consecutive_day_7

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollDay:
    work_date: str
    times: tuple[str, ...]
    check_in: str
    check_out: str
    shift: ShiftTimes
    is_consecutive_day_7: bool
    result: Optional[DayResult] = None

    @property
    def is_complete(self) -> bool:
        return self.result is not None

    @property
    def is_holiday(self) -> bool:
        return self.shift.is_holiday

    @property
    def has_overtime_tag(self) -> bool:
        """Overtime comes from the shift setting, not from a holiday or 7th day."""
        return self.shift.enable_overtime and not self.is_consecutive_day_7 and not self.shift.is_holiday


@dataclass(frozen=True)
class PayrollEmployee:
    fingerprint: str
    employee_id: Optional[int]
    employee_name: Optional[str]
    days: list[PayrollDay] = field(default_factory=list)
    total_work_days: float = 0.0
    total_ot_hours: float = 0.0
    total_lunch_break_ot: float = 0.0


@dataclass(frozen=True)
class PayrollReport:
    start: str
    end: str
    employees: list[PayrollEmployee]


class PayrollReportService:
    def __init__(
        self,
        punches: PunchRepository,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        *,
        policy: Optional[PayrollPolicy] = None,
        factory: Optional[DayCalculatorFactory] = None,
    ):
        self._punches = punches
        self._employees = employees
        self._shifts = shifts
        self._policy = policy or DEFAULT_POLICY
        self._factory = factory or DayCalculatorFactory()

    def build_payroll_report(self, *, start: Union[str, date], end: Union[str, date]) -> PayrollReport:
        start_iso, end_iso = require_date_range(start, end)

        punches = self._punches.list_range(start_date=start_iso, end_date=end_iso)
        shift_map = build_shift_map(self._shifts.list_range(start_date=start_iso, end_date=end_iso))
        employees_by_fp = {e.fingerprint: e for e in self._employees.list_all()}

        out: list[PayrollEmployee] = []
        for fingerprint, days in group_punches(punches).items():
            employee = employees_by_fp.get(fingerprint)
            dates = [d.work_date for d in days]
            assigned = collect_assigned_shifts(self._shifts, employee.employee_id if employee else None, dates)

            payroll_days: list[PayrollDay] = []
            for day in days:
                shift = get_shift_for_employee(
                    employee.employee_id if employee else None, day.work_date, assigned, shift_map
                )
                payroll_days.append(self._calculate_day(day, shift, dates))

            out.append(self._summarize(fingerprint, employee, payroll_days))

        out.sort(key=cmp_to_key(lambda a, b: compare_fingerprints(a.fingerprint, b.fingerprint)))
        logger.info("Payroll report %s..%s: %d employees, %d punches", start_iso, end_iso, len(out), len(punches))
        return PayrollReport(start=start_iso, end=end_iso, employees=out)

    def _calculate_day(self, day: DailyPunches, shift: ShiftTimes, dates: list[str]) -> PayrollDay:
        check_in, check_out = get_check_in_check_out(day.times)
        consecutive = is_consecutive_day_7(day.work_date, dates, self._policy.consecutive_days_for_ot)

        result = None
        if day.is_complete:
            result = calculate_work_days_and_ot(
                check_in,
                check_out,
                shift.check_in,
                shift.check_out,
                shift.is_holiday,
                consecutive,
                shift.enable_overtime,
                policy=self._policy,
                factory=self._factory,
            )
        else:
            logger.debug("Skipping incomplete day %s of %s: %d punches", day.work_date, day.fingerprint, len(day.times))

        return PayrollDay(
            work_date=day.work_date,
            times=day.times,
            check_in=check_in,
            check_out=check_out,
            shift=shift,
            is_consecutive_day_7=consecutive,
            result=result,
        )

    def _summarize(self, fingerprint: str, employee: Optional[Employee], days: list[PayrollDay]) -> PayrollEmployee:
        results = [d.result for d in days if d.result is not None]
        return PayrollEmployee(
            fingerprint=fingerprint,
            employee_id=employee.employee_id if employee else None,
            employee_name=employee.name if employee else None,
            days=days,
            total_work_days=round_one_decimal(sum(r.work_days for r in results)),
            total_ot_hours=round_one_decimal(sum(r.ot_hours for r in results)),
            total_lunch_break_ot=round_one_decimal(sum(r.lunch_break_ot for r in results)),
        )
