import pytest

from src.fingerprint_payroll.fingerprint_payroll.attendance.lateness import (
    calculate_effective_check_in,
    is_late_for_ranking,
)
from src.fingerprint_payroll.fingerprint_payroll.core.enums import LateTier
from src.fingerprint_payroll.fingerprint_payroll.payroll.policy import PayrollPolicy


@pytest.mark.parametrize(
    "actual, effective, tier, warning, late",
    [
        ("07:45", "08:00", LateTier.ON_TIME, False, False),
        ("08:00", "08:00", LateTier.ON_TIME, False, False),
        ("08:01", "08:00", LateTier.GRACE, False, False),
        ("08:10", "08:00", LateTier.GRACE, False, False),
        ("08:11", "08:30", LateTier.WARNING, True, False),
        ("08:40", "08:30", LateTier.WARNING, True, False),
        ("08:41", "09:00", LateTier.LATE, False, True),
        ("08:59", "09:00", LateTier.LATE, False, True),
        ("09:20", "10:00", LateTier.LATE, False, True),
    ],
)
def test_late_tiers_are_boundary_exact(actual, effective, tier, warning, late):
    result = calculate_effective_check_in(actual, "08:00")

    assert result.effective_check_in == effective
    assert result.tier == tier
    assert result.is_late_warning is warning
    assert result.is_late is late


def test_next_hour_rounding_does_not_wrap_midnight():
    assert calculate_effective_check_in("23:50", "08:00").effective_check_in == "24:00"


def test_thresholds_come_from_policy():
    policy = PayrollPolicy(late_threshold_minutes=5, late_warning_limit_minutes=20)

    assert calculate_effective_check_in("08:06", "08:00", policy).tier == LateTier.WARNING
    assert calculate_effective_check_in("08:21", "08:00", policy).tier == LateTier.LATE


def test_ranking_lateness_starts_after_grace_period():
    assert not is_late_for_ranking("08:10", "08:00")
    assert is_late_for_ranking("08:11", "08:00")
    assert not is_late_for_ranking("07:30", "08:00")
