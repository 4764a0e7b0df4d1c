from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest

from src.fingerprint_payroll.fingerprint_payroll.attendance.model import Punch
from src.fingerprint_payroll.fingerprint_payroll.employees.model import Employee
from src.fingerprint_payroll.fingerprint_payroll.shifts.model import Shift


@dataclass
class InMemoryPunches:
    punches: list[Punch] = field(default_factory=list)

    def list_all(self):
        return list(self.punches)

    def list_range(self, *, start_date: str, end_date: str):
        return [p for p in self.punches if start_date <= p.work_date <= end_date]

    def add_day(self, fingerprint: str, work_date: str, *times: str) -> None:
        for t in times:
            self.punches.append(Punch(fingerprint=fingerprint, work_date=work_date, time=t))


@dataclass
class InMemoryEmployees:
    employees: list[Employee] = field(default_factory=list)

    def list_all(self):
        return list(self.employees)


@dataclass
class InMemoryShifts:
    shifts: list[Shift] = field(default_factory=list)
    assigned: dict[tuple[int, str], Shift] = field(default_factory=dict)

    def list_range(self, *, start_date: str, end_date: str):
        return [s for s in self.shifts if start_date <= s.work_date <= end_date]

    def get_for_employee_and_date(self, *, employee_id: int, work_date: str) -> Optional[Shift]:
        return self.assigned.get((employee_id, work_date))


@pytest.fixture
def punches_repo() -> InMemoryPunches:
    return InMemoryPunches()


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def shifts_repo() -> InMemoryShifts:
    return InMemoryShifts()
