from .aggregation import per_employee_hours, shifts_per_day, total_hours
from .config import Config, cfg
from .day_matching import matches_day, weekday_name
from .diagnostics import run_diagnostics, run_hours_checks
from .identifiers import resolve_employee_id
from .main import run_preflight
from .shift import Employee, SchedulePeriod, Shift
from .timecalc import InvalidTimeFormat, duration, format_hours, to_minutes

__all__ = [
    "Config",
    "cfg",
    "Employee",
    "SchedulePeriod",
    "Shift",
    "InvalidTimeFormat",
    "to_minutes",
    "duration",
    "format_hours",
    "matches_day",
    "weekday_name",
    "resolve_employee_id",
    "total_hours",
    "per_employee_hours",
    "shifts_per_day",
    "run_hours_checks",
    "run_diagnostics",
    "run_preflight",
]
