from __future__ import annotations

from ..core.exceptions import ConfigurationError, ValidationError
from .datetime_utils import DateLike, as_date


def require_time_string(value: str, field_name: str) -> str:
    """Check an ``HH:MM`` or ``HH:MM:SS`` setting before it reaches the engine."""
    parts = str(value).split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise ConfigurationError(f"{field_name} must be HH:MM or HH:MM:SS, got {value!r}")
    if int(parts[0]) > 23 or int(parts[1]) > 59:
        raise ConfigurationError(f"{field_name} is out of range: {value!r}")
    return value


def require_positive(value: float, field_name: str) -> float:
    if value is None or value <= 0:
        raise ConfigurationError(f"{field_name} must be positive, got {value!r}")
    return value


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise ConfigurationError(f"{field_name} must not be negative, got {value!r}")
    return value


def require_date_range(start: DateLike, end: DateLike) -> tuple[str, str]:
    try:
        start_date, end_date = as_date(start), as_date(end)
    except ValueError as exc:
        raise ValidationError(f"Invalid date range: {exc}") from exc
    if start_date > end_date:
        raise ValidationError("Start date must not be after end date")
    return start_date.strftime("%Y-%m-%d"), end_date.strftime("%Y-%m-%d")
