from __future__ import annotations

from typing import Protocol, Sequence

from .model import Punch


class PunchRepository(Protocol):
    def list_all(self) -> Sequence[Punch]:
        raise NotImplementedError

    def list_range(self, *, start_date: str, end_date: str) -> Sequence[Punch]:
        """Punches with ``start_date <= work_date <= end_date`` (ISO dates)."""

        raise NotImplementedError
