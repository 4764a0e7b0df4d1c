from datetime import date

import pytest

from src.fingerprint_payroll.fingerprint_payroll.common.datetime_utils import (
    ReportPeriod,
    in_bounds,
    parse_iso_date,
    period_bounds,
)
from src.fingerprint_payroll.fingerprint_payroll.common.validators import require_date_range
from src.fingerprint_payroll.fingerprint_payroll.core.enums import PeriodFilter
from src.fingerprint_payroll.fingerprint_payroll.core.exceptions import ValidationError


def test_parse_iso_date():
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)


def test_month_bounds_use_last_day_of_month():
    period = ReportPeriod(filter=PeriodFilter.MONTH, month=2, year=2024)
    assert period_bounds(period) == ("2024-02-01", "2024-02-29")


def test_year_and_day_bounds():
    assert period_bounds(ReportPeriod(filter=PeriodFilter.YEAR, year=2025)) == ("2025-01-01", "2025-12-31")
    assert period_bounds(ReportPeriod(filter=PeriodFilter.DAY, day=date(2025, 3, 4))) == ("2025-03-04", "2025-03-04")


def test_all_bounds_span_available_dates():
    dates = {"2024-05-03", "2024-01-10", "2024-03-01"}
    assert period_bounds(ReportPeriod(), dates) == ("2024-01-10", "2024-05-03")
    assert period_bounds(ReportPeriod(), []) is None


def test_month_without_year_is_rejected():
    with pytest.raises(ValidationError):
        period_bounds(ReportPeriod(filter=PeriodFilter.MONTH, month=3))


def test_in_bounds():
    assert in_bounds("2024-03-15", ("2024-03-01", "2024-03-31"))
    assert not in_bounds("2024-04-01", ("2024-03-01", "2024-03-31"))
    assert in_bounds("1999-01-01", None)


def test_require_date_range():
    assert require_date_range(date(2024, 1, 1), "2024-01-31") == ("2024-01-01", "2024-01-31")
    with pytest.raises(ValidationError):
        require_date_range("2024-02-01", "2024-01-31")
    with pytest.raises(ValidationError):
        require_date_range("2024-13-01", "2024-12-31")
