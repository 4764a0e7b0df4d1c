import os


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(name, str(default)))


def _env_float(name: str, default: float) -> float:
    return float(os.environ.get(name, str(default)))


class Config:
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Payroll rules
    STANDARD_WORK_HOURS = _env_int("STANDARD_WORK_HOURS", 8)
    LATE_THRESHOLD_MINUTES = _env_int("LATE_THRESHOLD_MINUTES", 10)
    LATE_WARNING_LIMIT_MINUTES = _env_int("LATE_WARNING_LIMIT_MINUTES", 40)
    LATE_ROUND_UP_MINUTES = _env_int("LATE_ROUND_UP_MINUTES", 30)
    OT_THRESHOLD_MINUTES = _env_int("OT_THRESHOLD_MINUTES", 30)
    OT_ROUNDING_MINUTES = _env_int("OT_ROUNDING_MINUTES", 30)
    CONSECUTIVE_DAYS_FOR_OT = _env_int("CONSECUTIVE_DAYS_FOR_OT", 7)
    LUNCH_BREAK_OT_HOURS = _env_float("LUNCH_BREAK_OT_HOURS", 0.5)
    LUNCH_WINDOW_START = os.environ.get("LUNCH_WINDOW_START", "12:00")
    LUNCH_WINDOW_END = os.environ.get("LUNCH_WINDOW_END", "13:00")


PAYROLL_POLICY = {
    "standard_work_hours": Config.STANDARD_WORK_HOURS,
    "late_threshold_minutes": Config.LATE_THRESHOLD_MINUTES,
    "late_warning_limit_minutes": Config.LATE_WARNING_LIMIT_MINUTES,
    "late_round_up_minutes": Config.LATE_ROUND_UP_MINUTES,
    "ot_threshold_minutes": Config.OT_THRESHOLD_MINUTES,
    "ot_rounding_minutes": Config.OT_ROUNDING_MINUTES,
    "consecutive_days_for_ot": Config.CONSECUTIVE_DAYS_FOR_OT,
    "lunch_break_ot_hours": Config.LUNCH_BREAK_OT_HOURS,
    "lunch_window_start": Config.LUNCH_WINDOW_START,
    "lunch_window_end": Config.LUNCH_WINDOW_END,
}

LOG_LEVEL = Config.LOG_LEVEL
