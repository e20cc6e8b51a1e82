# shifthours/diagnostics.py
from __future__ import annotations

import logging
import sys
from typing import Any, Iterable, Mapping, Optional, Sequence

from shifthours.aggregation import (
    EmployeeInput,
    ShiftInput,
    per_employee_hours,
    shifts_per_day,
    unattributed_shifts,
    unmatched_shifts,
)
from shifthours.config import Config, cfg
from shifthours.identifiers import resolve_employee_id
from shifthours.reporting.data_models import (
    DiagnosticReport,
    HoursCheckCase,
    HoursCheckResult,
    ScheduleInspection,
)
from shifthours.reporting.text_report import render_diagnostic_report
from shifthours.shift import (
    SchedulePeriod,
    coerce_employees,
    coerce_period,
    coerce_shifts,
)
from shifthours.timecalc import duration

logger = logging.getLogger(__name__)

DEFAULT_HOURS_CASES: tuple[HoursCheckCase, ...] = (
    HoursCheckCase("04:00", "06:00", 2.0),
    HoursCheckCase("08:00", "12:30", 4.5),
    HoursCheckCase("14:00", "18:00", 4.0),
    HoursCheckCase("22:00", "02:00", 4.0),  # crosses midnight
)


def _check_case(case: HoursCheckCase, tolerance: float) -> HoursCheckResult:
    error: Optional[str] = None
    try:
        expected = float(case.expected)
    except (TypeError, ValueError) as exc:
        expected, error = float("nan"), f"expected value {case.expected!r}: {exc}"
    actual = duration(case.start_time, case.end_time)
    passed = error is None and abs(actual - expected) < tolerance
    return HoursCheckResult(
        start_time=case.start_time,
        end_time=case.end_time,
        expected=expected,
        actual=actual,
        passed=passed,
        error=error,
    )


def run_hours_checks(
    cases: Iterable[HoursCheckCase] | None = None,
    *,
    tolerance: float | None = None,
) -> list[HoursCheckResult]:
    """
    Run known-answer duration probes. A failing probe is reported in its
    result, never raised.
    """
    tol = cfg.CHECK_TOLERANCE if tolerance is None else float(tolerance)
    results = [
        _check_case(c, tol) for c in (DEFAULT_HOURS_CASES if cases is None else cases)
    ]
    failed = [r for r in results if not r.passed]
    if failed:
        logger.warning("%d of %d hours checks failed", len(failed), len(results))
    else:
        logger.debug("All %d hours checks passed", len(results))
    return results


def inspect_schedule(
    period: SchedulePeriod | Mapping[str, Any] | None,
    shifts: ShiftInput,
    employees: EmployeeInput,
    *,
    config: Config | None = None,
) -> ScheduleInspection:
    """
    Structural read of the inputs an export is about to trust. Inputs are
    not modified. Without a period the per-day breakdown is empty.
    """
    C = config or cfg
    shift_list = coerce_shifts(shifts)
    emp_list = coerce_employees(employees)
    period_obj = coerce_period(period) if period is not None else None

    known_ids = {e.id for e in emp_list}
    # distinct resolved ids, first-seen order
    referenced = list(
        dict.fromkeys(
            emp_id
            for emp_id in map(resolve_employee_id, shift_list)
            if emp_id is not None
        )
    )

    return ScheduleInspection(
        shift_count=len(shift_list),
        employee_count=len(emp_list),
        has_date_field=any(s.date not in (None, "") for s in shift_list),
        has_day_field=any(bool(s.day) for s in shift_list),
        has_employee_id=any(s.employee_id is not None for s in shift_list),
        has_user_id=any(s.user_id is not None for s in shift_list),
        matching_ids_count=sum(1 for i in referenced if i in known_ids),
        unknown_employee_ids=[i for i in referenced if i not in known_ids],
        unattributed_shift_count=len(unattributed_shifts(shift_list)),
        unmatched_day_count=len(unmatched_shifts(shift_list)),
        shifts_per_day=(
            shifts_per_day(period_obj, shift_list, config=C)
            if period_obj is not None
            else {}
        ),
        employee_hours=per_employee_hours(emp_list, shift_list, config=C),
        first_shift=shift_list[0] if shift_list else None,
        first_employee=emp_list[0] if emp_list else None,
        period=period_obj,
    )


def run_diagnostics(
    period: SchedulePeriod | Mapping[str, Any] | None,
    shifts: ShiftInput,
    employees: EmployeeInput,
    *,
    config: Config | None = None,
    cases: Sequence[HoursCheckCase] | None = None,
    verbose: bool = False,
    stream=None,
) -> DiagnosticReport:
    """
    Pre-flight check before an export.

    Returns:
      report.hours_checks: one HoursCheckResult per known-answer case
      report.inspection: ScheduleInspection, or None when the inputs could
        not be read (the reason is appended to report.errors)
    If `verbose` is True, the report is printed to `stream` (stdout by default).
    """
    C = config or cfg
    report = DiagnosticReport(
        hours_checks=run_hours_checks(cases, tolerance=C.CHECK_TOLERANCE)
    )

    inspection: Optional[ScheduleInspection] = None
    try:
        inspection = inspect_schedule(period, shifts, employees, config=C)
    except (TypeError, ValueError) as exc:
        logger.warning("Schedule inspection skipped: %s", exc)
        report.errors.append(f"Schedule inspection skipped: {exc}")
    report.inspection = inspection

    if verbose:
        render_diagnostic_report(report, config=C, stream=stream or sys.stdout)
    return report
