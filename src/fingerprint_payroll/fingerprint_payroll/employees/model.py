from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee enrolled on the fingerprint scanner."""

    employee_id: int
    fingerprint: str
    name: Optional[str] = None
