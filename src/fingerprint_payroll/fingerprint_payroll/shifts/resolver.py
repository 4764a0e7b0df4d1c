"""Shift resolution.

Two lookups coexist: by date only, and by employee and date where a shift
assigned to the employee wins over the date's general shift. Both fall back to
the default 08:00-17:00 shift.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from .model import DEFAULT_SHIFT, Shift, ShiftTimes
from .repository import ShiftRepository


def build_shift_map(shifts: Iterable[Shift]) -> dict[str, Shift]:
    """Index shifts by date; the lowest ``shift_id`` wins on a shared date."""
    out: dict[str, Shift] = {}
    for s in shifts:
        current = out.get(s.work_date)
        if current is None or s.shift_id < current.shift_id:
            out[s.work_date] = s
    return out


def employee_shift_key(employee_id: int, work_date: str) -> str:
    return f"{employee_id}-{work_date}"


def get_shift_for_date(work_date: str, shift_map: Mapping[str, Shift]) -> ShiftTimes:
    shift = shift_map.get(work_date)
    if shift:
        return shift.to_times()
    return DEFAULT_SHIFT


def get_shift_for_employee(
    employee_id: Optional[int],
    work_date: str,
    employee_shift_map: Mapping[str, Shift],
    shift_map: Mapping[str, Shift],
) -> ShiftTimes:
    if employee_id is not None:
        assigned = employee_shift_map.get(employee_shift_key(employee_id, work_date))
        if assigned:
            return assigned.to_times()
    return get_shift_for_date(work_date, shift_map)


def collect_assigned_shifts(
    shifts: ShiftRepository,
    employee_id: Optional[int],
    dates: Iterable[str],
) -> dict[str, Shift]:
    """Per-employee assignments keyed by :func:`employee_shift_key`."""
    if employee_id is None:
        return {}
    out: dict[str, Shift] = {}
    for d in dates:
        shift = shifts.get_for_employee_and_date(employee_id=employee_id, work_date=d)
        if shift:
            out[employee_shift_key(employee_id, d)] = shift
    return out
