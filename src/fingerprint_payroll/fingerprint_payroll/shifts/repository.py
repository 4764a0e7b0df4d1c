from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_range(self, *, start_date: str, end_date: str) -> Sequence[Shift]:
        raise NotImplementedError

    def get_for_employee_and_date(self, *, employee_id: int, work_date: str) -> Optional[Shift]:
        """Shift specifically assigned to an employee on a date, if any."""

        raise NotImplementedError
