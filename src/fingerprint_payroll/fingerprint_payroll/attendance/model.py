from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Punch:
    """Domain entity: one raw scanner punch."""

    fingerprint: str
    work_date: str
    time: str
    punch_id: Optional[int] = None
    is_manual: bool = False


@dataclass(frozen=True)
class DailyPunches:
    """Distinct punch times of one fingerprint on one date, sorted."""

    fingerprint: str
    work_date: str
    times: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_complete(self) -> bool:
        """Only a check-in/check-out pair is eligible for calculation."""
        return len(self.times) == 2
