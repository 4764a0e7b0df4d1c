"""Example: payroll report through the service layer, without any storage.

Repositories are plain in-memory lists; a real deployment plugs its own
storage behind the same protocols.
"""

from fingerprint_payroll.attendance.model import Punch
from fingerprint_payroll.container import build_container
from fingerprint_payroll.employees.model import Employee
from fingerprint_payroll.shifts.model import Shift


class ListPunches:
    def __init__(self, punches):
        self._punches = punches

    def list_all(self):
        return list(self._punches)

    def list_range(self, *, start_date, end_date):
        return [p for p in self._punches if start_date <= p.work_date <= end_date]


class ListEmployees:
    def __init__(self, employees):
        self._employees = employees

    def list_all(self):
        return list(self._employees)


class ListShifts:
    def __init__(self, shifts):
        self._shifts = shifts

    def list_range(self, *, start_date, end_date):
        return [s for s in self._shifts if start_date <= s.work_date <= end_date]

    def get_for_employee_and_date(self, *, employee_id, work_date):
        return None


def main():
    punches = ListPunches(
        [
            Punch(fingerprint="1", work_date="2024-01-01", time="08:05:12"),
            Punch(fingerprint="1", work_date="2024-01-01", time="19:02:40"),
            Punch(fingerprint="1", work_date="2024-01-02", time="08:45:00"),
            Punch(fingerprint="1", work_date="2024-01-02", time="17:00:00"),
        ]
    )
    employees = ListEmployees([Employee(employee_id=1, fingerprint="1", name="Somchai")])
    shifts = ListShifts(
        [Shift(shift_id=1, work_date="2024-01-01", check_in="08:00:00", check_out="17:00:00", enable_overtime=True)]
    )

    container = build_container(punches=punches, employees=employees, shifts=shifts)
    report = container.payroll_report_service.build_payroll_report(start="2024-01-01", end="2024-01-31")
    for emp in report.employees:
        print(emp.employee_name, emp.total_work_days, emp.total_ot_hours, emp.total_lunch_break_ot)
        for day in emp.days:
            print("  ", day.work_date, day.check_in, day.check_out, day.result)


if __name__ == "__main__":
    main()
