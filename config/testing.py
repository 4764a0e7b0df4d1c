# Tests always run with the standard rules, whatever the environment says.
PAYROLL_POLICY = {}

LOG_LEVEL = "WARNING"
