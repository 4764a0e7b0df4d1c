from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv

from config import get_settings_module

from .attendance.repository import PunchRepository
from .core.exceptions import ConfigurationError
from .dashboard.service import DashboardService
from .employees.repository import EmployeeRepository
from .payroll.calculator.factory import DayCalculatorFactory
from .payroll.policy import PayrollPolicy
from .payroll.service import PayrollReportService
from .shifts.repository import ShiftRepository

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Container:
    settings: Any
    policy: PayrollPolicy

    punches_repo: PunchRepository
    employees_repo: EmployeeRepository
    shifts_repo: ShiftRepository

    payroll_report_service: PayrollReportService
    dashboard_service: DashboardService


def load_settings(settings_module: Optional[str] = None) -> Any:
    load_dotenv(override=False)
    name = settings_module or get_settings_module()
    try:
        return importlib.import_module(name)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot load settings module {name!r}") from exc


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def build_container(
    *,
    punches: PunchRepository,
    employees: EmployeeRepository,
    shifts: ShiftRepository,
    settings_module: Optional[str] = None,
) -> Container:
    """Wire settings, logging, payroll policy and services.

    Storage is supplied by the caller through the repository protocols.
    """
    settings = load_settings(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    policy = PayrollPolicy.from_settings(settings)
    logger.info("Loaded settings %s", settings.__name__)

    factory = DayCalculatorFactory()
    payroll_report_service = PayrollReportService(punches, employees, shifts, policy=policy, factory=factory)
    dashboard_service = DashboardService(punches, employees, shifts, policy=policy)

    return Container(
        settings=settings,
        policy=policy,
        punches_repo=punches,
        employees_repo=employees,
        shifts_repo=shifts,
        payroll_report_service=payroll_report_service,
        dashboard_service=dashboard_service,
    )
