from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Optional

from ..attendance.lateness import is_late_for_ranking
from ..attendance.punches import get_check_in_check_out, group_punches
from ..attendance.repository import PunchRepository
from ..common.datetime_utils import ReportPeriod, in_bounds, period_bounds
from ..common.time_utils import round_one_decimal
from ..core.enums import AttendanceRating
from ..employees.ordering import compare_fingerprints
from ..employees.repository import EmployeeRepository
from ..payroll.policy import DEFAULT_POLICY, PayrollPolicy
from ..shifts.repository import ShiftRepository
from ..shifts.resolver import build_shift_map, collect_assigned_shifts, get_shift_for_employee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceRanking:
    fingerprint: str
    employee_name: Optional[str]
    employee_id: Optional[int]
    work_days: int
    late_days: int
    late_percentage: float
    rating: AttendanceRating


@dataclass(frozen=True)
class HourCount:
    hour: str
    count: int


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    total_punches: int
    last_updated_date: Optional[str]
    total_days_with_data: int
    check_in_stats: list[HourCount]
    check_out_stats: list[HourCount]


def _compare_rankings(a: AttendanceRanking, b: AttendanceRanking) -> int:
    """Employees with an id first, by id; the rest by fingerprint."""
    if a.employee_id is not None and b.employee_id is not None:
        return a.employee_id - b.employee_id
    if a.employee_id is not None:
        return -1
    if b.employee_id is not None:
        return 1
    return compare_fingerprints(a.fingerprint, b.fingerprint)


def _hour_stats(counter: Counter) -> list[HourCount]:
    return sorted((HourCount(hour=f"{h}:00", count=n) for h, n in counter.items()), key=lambda x: x.hour)


class DashboardService:
    def __init__(
        self,
        punches: PunchRepository,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        *,
        policy: Optional[PayrollPolicy] = None,
    ):
        self._punches = punches
        self._employees = employees
        self._shifts = shifts
        self._policy = policy or DEFAULT_POLICY

    def _punches_in(self, period: ReportPeriod):
        punches = list(self._punches.list_all())
        bounds = period_bounds(period, {p.work_date for p in punches})
        return [p for p in punches if in_bounds(p.work_date, bounds)], bounds

    def attendance_ranking(self, period: Optional[ReportPeriod] = None, *, only_with_employee: bool = False) -> list[AttendanceRanking]:
        punches, bounds = self._punches_in(period or ReportPeriod())
        shift_map = {}
        if bounds:
            shift_map = build_shift_map(self._shifts.list_range(start_date=bounds[0], end_date=bounds[1]))
        employees_by_fp = {e.fingerprint: e for e in self._employees.list_all()}

        rankings: list[AttendanceRanking] = []
        for fingerprint, days in group_punches(punches).items():
            employee = employees_by_fp.get(fingerprint)
            assigned = collect_assigned_shifts(
                self._shifts, employee.employee_id if employee else None, [d.work_date for d in days]
            )

            work_days = 0
            late_days = 0
            for day in days:
                if not day.is_complete:
                    continue
                work_days += 1
                check_in, _ = get_check_in_check_out(day.times)
                shift = get_shift_for_employee(
                    employee.employee_id if employee else None, day.work_date, assigned, shift_map
                )
                if is_late_for_ranking(check_in, shift.check_in, self._policy):
                    late_days += 1

            late_percentage = round_one_decimal(late_days / work_days * 100) if work_days else 0.0
            rating = (
                AttendanceRating.GOOD
                if late_percentage <= self._policy.good_rating_max_late_percentage
                else AttendanceRating.NEEDS_IMPROVEMENT
            )
            rankings.append(
                AttendanceRanking(
                    fingerprint=fingerprint,
                    employee_name=employee.name if employee else None,
                    employee_id=employee.employee_id if employee else None,
                    work_days=work_days,
                    late_days=late_days,
                    late_percentage=late_percentage,
                    rating=rating,
                )
            )

        if only_with_employee:
            rankings = [r for r in rankings if r.employee_name and r.employee_name.strip()]

        rankings.sort(key=cmp_to_key(_compare_rankings))
        return rankings

    def dashboard_stats(self, period: Optional[ReportPeriod] = None) -> DashboardStats:
        punches, _ = self._punches_in(period or ReportPeriod())

        last_updated = None
        if punches:
            last_updated = max(punches, key=lambda p: (p.work_date, p.time)).work_date

        check_in_hours: Counter = Counter()
        check_out_hours: Counter = Counter()
        for days in group_punches(punches).values():
            for day in days:
                if len(day.times) < 2:
                    continue
                check_in, check_out = get_check_in_check_out(day.times)
                check_in_hours[check_in.split(":")[0]] += 1
                check_out_hours[check_out.split(":")[0]] += 1

        stats = DashboardStats(
            total_employees=len(self._employees.list_all()),
            total_punches=len(punches),
            last_updated_date=last_updated,
            total_days_with_data=len({p.work_date for p in punches}),
            check_in_stats=_hour_stats(check_in_hours),
            check_out_stats=_hour_stats(check_out_hours),
        )
        logger.debug("Dashboard stats: %d punches over %d days", stats.total_punches, stats.total_days_with_data)
        return stats
