from __future__ import annotations

from typing import Optional


def _as_number(value: str) -> Optional[int]:
    # Whole numbers only; "nan" and "inf" must not compare as numbers.
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def compare_fingerprints(a: str, b: str) -> int:
    """Numeric order when both fingerprints are integers, text order otherwise."""
    a_num, b_num = _as_number(a), _as_number(b)
    if a_num is not None and b_num is not None:
        return (a_num > b_num) - (a_num < b_num)
    return (a > b) - (a < b)
