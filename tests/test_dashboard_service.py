from __future__ import annotations

from datetime import date, timedelta

from src.fingerprint_payroll.fingerprint_payroll.common.datetime_utils import ReportPeriod
from src.fingerprint_payroll.fingerprint_payroll.core.enums import AttendanceRating, PeriodFilter
from src.fingerprint_payroll.fingerprint_payroll.dashboard.service import DashboardService, HourCount
from src.fingerprint_payroll.fingerprint_payroll.employees.model import Employee
from src.fingerprint_payroll.fingerprint_payroll.shifts.model import Shift


def _dates(start: str, count: int) -> list[str]:
    first = date.fromisoformat(start)
    return [(first + timedelta(days=i)).isoformat() for i in range(count)]


def _add_days(repo, fingerprint: str, dates: list[str], late_count: int) -> None:
    for i, d in enumerate(dates):
        check_in = "08:15:00" if i < late_count else "07:58:00"
        repo.add_day(fingerprint, d, check_in, "17:00:00")


def test_ranking_rates_and_orders_employees(punches_repo, employees_repo, shifts_repo):
    employees_repo.employees.extend(
        [
            Employee(employee_id=2, fingerprint="1", name="B"),
            Employee(employee_id=1, fingerprint="2", name="A"),
        ]
    )
    dates = _dates("2024-03-01", 10)
    _add_days(punches_repo, "1", dates, late_count=2)
    _add_days(punches_repo, "2", dates, late_count=1)
    _add_days(punches_repo, "9", dates[:1], late_count=0)
    punches_repo.add_day("9", "2024-03-02", "08:30:00")

    ranking = DashboardService(punches_repo, employees_repo, shifts_repo).attendance_ranking()

    assert [r.fingerprint for r in ranking] == ["2", "1", "9"]
    a, b, unknown = ranking
    assert (a.work_days, a.late_days, a.late_percentage, a.rating) == (10, 1, 10.0, AttendanceRating.GOOD)
    assert (b.work_days, b.late_days, b.late_percentage, b.rating) == (10, 2, 20.0, AttendanceRating.NEEDS_IMPROVEMENT)
    assert (unknown.employee_id, unknown.work_days, unknown.late_days) == (None, 1, 0)


def test_ranking_can_skip_unknown_employees(punches_repo, employees_repo, shifts_repo):
    employees_repo.employees.append(Employee(employee_id=1, fingerprint="1", name="  "))
    punches_repo.add_day("1", "2024-03-01", "08:00:00", "17:00:00")
    punches_repo.add_day("2", "2024-03-01", "08:00:00", "17:00:00")

    ranking = DashboardService(punches_repo, employees_repo, shifts_repo).attendance_ranking(only_with_employee=True)

    assert ranking == []


def test_ranking_uses_the_day_shift(punches_repo, employees_repo, shifts_repo):
    shifts_repo.shifts.append(Shift(shift_id=1, work_date="2024-03-01", check_in="09:00:00", check_out="18:00:00"))
    punches_repo.add_day("1", "2024-03-01", "09:05:00", "18:00:00")
    punches_repo.add_day("1", "2024-03-02", "09:05:00", "18:00:00")

    ranking = DashboardService(punches_repo, employees_repo, shifts_repo).attendance_ranking()

    # on time against 09:00, late against the default 08:00 the next day
    assert ranking[0].late_days == 1
    assert ranking[0].late_percentage == 50.0


def test_ranking_month_filter(punches_repo, employees_repo, shifts_repo):
    punches_repo.add_day("1", "2024-03-31", "08:30:00", "17:00:00")
    punches_repo.add_day("1", "2024-04-01", "08:00:00", "17:00:00")

    period = ReportPeriod(filter=PeriodFilter.MONTH, month=4, year=2024)
    ranking = DashboardService(punches_repo, employees_repo, shifts_repo).attendance_ranking(period)

    assert (ranking[0].work_days, ranking[0].late_days, ranking[0].late_percentage) == (1, 0, 0.0)


def test_dashboard_stats(punches_repo, employees_repo, shifts_repo):
    employees_repo.employees.extend(
        [Employee(employee_id=1, fingerprint="1"), Employee(employee_id=2, fingerprint="2"), Employee(employee_id=3, fingerprint="3")]
    )
    punches_repo.add_day("1", "2024-03-01", "08:01:00", "17:02:00")
    punches_repo.add_day("1", "2024-03-02", "07:59:00", "12:00:00", "17:30:00")
    punches_repo.add_day("2", "2024-03-02", "09:00:00")

    stats = DashboardService(punches_repo, employees_repo, shifts_repo).dashboard_stats()

    assert stats.total_employees == 3
    assert stats.total_punches == 6
    assert stats.last_updated_date == "2024-03-02"
    assert stats.total_days_with_data == 2
    assert stats.check_in_stats == [HourCount(hour="07:00", count=1), HourCount(hour="08:00", count=1)]
    assert stats.check_out_stats == [HourCount(hour="17:00", count=2)]


def test_dashboard_stats_day_filter_without_data(punches_repo, employees_repo, shifts_repo):
    punches_repo.add_day("1", "2024-03-01", "08:00:00", "17:00:00")

    period = ReportPeriod(filter=PeriodFilter.DAY, day=date(2024, 3, 5))
    stats = DashboardService(punches_repo, employees_repo, shifts_repo).dashboard_stats(period)

    assert stats.total_punches == 0
    assert stats.last_updated_date is None
    assert stats.check_in_stats == []
