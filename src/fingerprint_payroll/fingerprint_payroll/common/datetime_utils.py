from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional, Union

from ..core.enums import PeriodFilter
from ..core.exceptions import ValidationError

DateLike = Union[str, date]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def as_date(value: DateLike) -> date:
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def as_iso(value: DateLike) -> str:
    return as_date(value).strftime("%Y-%m-%d")


@dataclass(frozen=True)
class ReportPeriod:
    """Period selector for dashboard reports.

    ``day`` is used by ``DAY``; ``month`` and ``year`` by ``MONTH``; ``year``
    alone by ``YEAR``. ``ALL`` spans every date that has data.
    """

    filter: PeriodFilter = PeriodFilter.ALL
    day: Optional[date] = None
    month: Optional[int] = None
    year: Optional[int] = None


def period_bounds(period: ReportPeriod, available_dates: Iterable[str] = ()) -> Optional[tuple[str, str]]:
    """Inclusive (start, end) ISO dates for a report period.

    Returns None for ``ALL`` when there is no data to span.
    """
    if period.filter == PeriodFilter.YEAR:
        if not period.year:
            raise ValidationError("Year is required for a yearly report")
        return f"{period.year}-01-01", f"{period.year}-12-31"

    if period.filter == PeriodFilter.MONTH:
        if not period.month or not period.year:
            raise ValidationError("Month and year are required for a monthly report")
        if not 1 <= period.month <= 12:
            raise ValidationError(f"Invalid month: {period.month}")
        last_day = calendar.monthrange(period.year, period.month)[1]
        return (
            f"{period.year}-{period.month:02d}-01",
            f"{period.year}-{period.month:02d}-{last_day:02d}",
        )

    if period.filter == PeriodFilter.DAY:
        if not period.day:
            raise ValidationError("Day is required for a daily report")
        day = as_iso(period.day)
        return day, day

    dates = sorted(available_dates)
    if not dates:
        return None
    return dates[0], dates[-1]


def in_bounds(work_date: str, bounds: Optional[tuple[str, str]]) -> bool:
    if bounds is None:
        return True
    start, end = bounds
    return start <= work_date <= end
