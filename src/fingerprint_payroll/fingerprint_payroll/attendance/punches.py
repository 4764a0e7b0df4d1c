from __future__ import annotations

from typing import Iterable, Sequence

from ..common.time_utils import truncate_to_minute
from ..core.constants import DEFAULT_CHECK_IN, DEFAULT_CHECK_OUT
from .model import DailyPunches, Punch


def get_check_in_check_out(times: Sequence[str]) -> tuple[str, str]:
    """Earliest and latest punch of a day as ``HH:MM``.

    Zero-padded 24h strings sort correctly as text. With no punches the default
    shift times are returned; a lone punch gets the default check-out.
    """
    if not times:
        return DEFAULT_CHECK_IN, DEFAULT_CHECK_OUT

    ordered = sorted(truncate_to_minute(t) for t in times)
    check_in = ordered[0]
    check_out = ordered[-1] if len(ordered) > 1 else DEFAULT_CHECK_OUT
    return check_in, check_out


def group_punches(punches: Iterable[Punch]) -> dict[str, list[DailyPunches]]:
    """Group punches by fingerprint, then by date.

    Duplicate times on the same day are dropped. Days are returned in date
    order and times in time order.
    """
    grouped: dict[str, dict[str, list[str]]] = {}
    for p in punches:
        times = grouped.setdefault(p.fingerprint, {}).setdefault(p.work_date, [])
        if p.time not in times:
            times.append(p.time)

    out: dict[str, list[DailyPunches]] = {}
    for fingerprint, by_date in grouped.items():
        out[fingerprint] = [
            DailyPunches(fingerprint=fingerprint, work_date=d, times=tuple(sorted(by_date[d])))
            for d in sorted(by_date)
        ]
    return out
