"""
Pre-flight entry point for schedule exports.

Usage via cli:
    python -m shifthours payload.json [--strict] [--no-grid] [--log-level DEBUG]

The payload is a JSON object with `schedule`, `shifts` and `employees`
using the same field names as the scheduling API.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence

import pandas as pd

from shifthours.aggregation import (
    EmployeeInput,
    ShiftInput,
    hours_by_day,
    per_employee_hours,
    shifts_per_day,
)
from shifthours.config import Config, cfg
from shifthours.diagnostics import run_diagnostics
from shifthours.identifiers import normalize_employee_refs
from shifthours.reporting.data_models import DiagnosticReport
from shifthours.reporting.grid import weekly_grid
from shifthours.shift import (
    Employee,
    SchedulePeriod,
    Shift,
    coerce_employees,
    coerce_period,
    coerce_shifts,
)

logger = logging.getLogger(__name__)


@dataclass
class PreflightResult:
    """Everything an export needs, computed in one pass."""

    report: DiagnosticReport
    employee_hours: dict[int, float]
    shifts_per_day: dict[str, list[Shift]]
    daily_hours: pd.DataFrame
    grid: pd.DataFrame
    # copies with employee_id set to the resolved owner
    shifts: list[Shift]


@dataclass
class Payload:
    period: SchedulePeriod
    shifts: list[Shift]
    employees: list[Employee]


def run_preflight(
    period: SchedulePeriod | Mapping[str, Any],
    shifts: ShiftInput,
    employees: EmployeeInput,
    *,
    config: Config | None = None,
    validate_config: bool = True,
    verbose: bool = True,
    stream=None,
) -> PreflightResult:
    """
    Run diagnostics, then compute hours, day buckets and the weekly grid.

    Diagnostics see the shifts as supplied; everything after works on
    copies whose `employee_id` is the resolved owner.

    Parameters
    ----------
    period:
        SchedulePeriod or a `{startDate, endDate}` record.
    shifts, employees:
        Objects or wire records; None is treated as empty.
    config:
        Defaults to `shifthours.config.cfg`.
    validate_config:
        Toggle to run `Config.validate()` first.
    verbose:
        Print the diagnostic report to `stream`.

    Returns
    -------
    PreflightResult
    """
    C = config or cfg
    if validate_config:
        C.validate()

    period_obj = coerce_period(period)
    shift_list = coerce_shifts(shifts)
    emp_list = coerce_employees(employees)

    report = run_diagnostics(
        period_obj, shift_list, emp_list, config=C, verbose=verbose, stream=stream
    )
    if not report.all_checks_passed:
        logger.warning(
            "Exporting with %d failed hours check(s)", len(report.failed_checks)
        )

    owned = normalize_employee_refs(shift_list)
    return PreflightResult(
        report=report,
        employee_hours=per_employee_hours(emp_list, owned, config=C),
        shifts_per_day=shifts_per_day(period_obj, owned, config=C),
        daily_hours=hours_by_day(emp_list, period_obj, owned, config=C),
        grid=weekly_grid(period_obj, owned, emp_list, config=C),
        shifts=owned,
    )


def load_payload(path: str | Path) -> Payload:
    """
    Read a `{schedule, shifts, employees}` JSON document from disk.
    `shifts` and `employees` may be omitted.
    """
    file_path = Path(path).expanduser()
    if file_path.suffix.lower() != ".json":
        raise ValueError("load_payload expects a path to a .json file.")
    if not file_path.exists():
        raise FileNotFoundError(f"Payload JSON file not found: {file_path}")

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {file_path}") from exc

    if not isinstance(data, Mapping):
        raise TypeError("Payload must be a JSON object.")
    schedule = data.get("schedule")
    if schedule is None:
        raise ValueError("Payload must contain a 'schedule' object.")

    for key in ("shifts", "employees"):
        entries = data.get(key)
        if entries is not None and not isinstance(entries, list):
            raise TypeError(f"'{key}' must be a list of objects.")

    return Payload(
        period=SchedulePeriod.from_record(schedule),
        shifts=coerce_shifts(data.get("shifts")),
        employees=coerce_employees(data.get("employees")),
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="shifthours",
        description="Check shift hour arithmetic and summarise a weekly schedule.",
    )
    parser.add_argument("payload", type=Path, help="JSON file with schedule data.")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any hours check fails.",
    )
    parser.add_argument(
        "--no-grid",
        action="store_true",
        help="Do not print the weekly grid.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    payload = load_payload(args.payload)
    result = run_preflight(
        payload.period, payload.shifts, payload.employees, stream=sys.stdout
    )

    if not args.no_grid:
        print("\nWeekly schedule:\n")
        print(result.grid.to_string(index=False))

    if args.strict and not result.report.all_checks_passed:
        return 1
    return 0
