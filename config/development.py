import os

from config.config import PAYROLL_POLICY as _BASE_POLICY

PAYROLL_POLICY = dict(_BASE_POLICY)

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
