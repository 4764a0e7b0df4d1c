from __future__ import annotations

from datetime import timedelta
from typing import Iterable

from ..common.datetime_utils import DateLike, as_date
from ..core.constants import CONSECUTIVE_DAYS_FOR_OT


def is_consecutive_day_7(
    work_date: DateLike,
    employee_dates: Iterable[DateLike],
    period: int = CONSECUTIVE_DAYS_FOR_OT,
) -> bool:
    """True when ``work_date`` is the 7th, 14th, 21st, ... day of an unbroken
    run of calendar days in ``employee_dates``.

    The count restarts after any missing day. Dates may be ISO strings or
    ``date`` objects; duplicates are ignored.
    """
    dates = sorted({as_date(d) for d in employee_dates})
    target = as_date(work_date)
    if target not in dates:
        return False

    current = dates.index(target)
    one_day = timedelta(days=1)

    start = current
    while start > 0 and dates[start - 1] == dates[start] - one_day:
        start -= 1

    # The run may continue past work_date; only the days before it count.
    position = current - start + 1
    return position % period == 0
