from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

import numpy as np

from shifthours.config import Config, cfg
from shifthours.reporting.data_models import (
    DiagnosticReport,
    HoursCheckResult,
    ScheduleInspection,
)
from shifthours.timecalc import format_hours


def _fmt_float(x: Any, nd: int = 2) -> str:
    try:
        value = float(x)
    except (TypeError, ValueError):
        return str(x)
    if np.isnan(value):
        return "nan"
    return f"{value:.{nd}f}"


def print_hours_checks(
    results: list[HoursCheckResult], *, stream: TextIO | None = None
) -> None:
    """One ✅/❌ line per known-answer case, then a verdict line."""
    stream = stream or sys.stdout
    print("\nHours calculation checks:\n", file=stream)
    for r in results:
        mark = "✅" if r.passed else "❌"
        line = (
            f"{mark} {r.start_time}-{r.end_time} | expected {_fmt_float(r.expected)}h"
            f" | actual {_fmt_float(r.actual)}h"
        )
        if r.error:
            line += f" | error: {r.error}"
        print(line, file=stream)

    failed = sum(1 for r in results if not r.passed)
    if failed:
        print(
            f"⚠️ {failed} of {len(results)} checks failed; "
            "hour totals in this export should not be trusted.",
            file=stream,
        )
    else:
        print(f"All {len(results)} hours checks passed.", file=stream)


def print_inspection(
    insp: ScheduleInspection,
    *,
    config: Config | None = None,
    stream: TextIO | None = None,
) -> None:
    stream = stream or sys.stdout
    C = config or cfg

    print("\nSchedule structure:\n", file=stream)
    if insp.period is not None:
        print(
            f"Period: {insp.period.start_date:%d/%m/%Y} - "
            f"{insp.period.end_date:%d/%m/%Y}"
            f" (published: {'yes' if insp.period.is_published else 'no'})",
            file=stream,
        )
    print(f"Shifts: {insp.shift_count} | Employees: {insp.employee_count}", file=stream)

    fields = (
        ("date", insp.has_date_field),
        ("day", insp.has_day_field),
        ("employeeId", insp.has_employee_id),
        ("userId", insp.has_user_id),
    )
    print(
        "Fields present: "
        + ", ".join(f"{name}={'yes' if ok else 'no'}" for name, ok in fields),
        file=stream,
    )

    if insp.unknown_employee_ids:
        sample = ", ".join(str(i) for i in insp.unknown_employee_ids[:10])
        more = (
            f", +{len(insp.unknown_employee_ids) - 10} more"
            if len(insp.unknown_employee_ids) > 10
            else ""
        )
        print(
            f"❌ {insp.matching_ids_count} referenced employee id(s) known; "
            f"unknown: {sample}{more}",
            file=stream,
        )
    else:
        print(
            f"✅ All {insp.matching_ids_count} referenced employee id(s) are known.",
            file=stream,
        )
    if insp.unattributed_shift_count:
        print(
            f"❌ {insp.unattributed_shift_count} shift(s) have neither employeeId "
            "nor userId and are left out of per-employee hours.",
            file=stream,
        )
    if insp.unmatched_day_count:
        print(
            f"❌ {insp.unmatched_day_count} shift(s) have no readable date/day "
            "and appear on no day.",
            file=stream,
        )

    if insp.shifts_per_day:
        print("\nShifts per day:", file=stream)
        for name, day_shifts in insp.shifts_per_day.items():
            print(f"  {name:<9} : {len(day_shifts):>3}", file=stream)

    _print_employee_hours(insp, limit=C.MAX_REPORTED_EMPLOYEES, stream=stream)


def _print_employee_hours(
    insp: ScheduleInspection, *, limit: Optional[int], stream: TextIO
) -> None:
    if not insp.employee_hours:
        print("\nPer-employee hours: (no employees)", file=stream)
        return

    items = list(insp.employee_hours.items())
    shown = items if limit is None else items[:limit]
    print("\nPer-employee hours:", file=stream)
    for emp_id, hours in shown:
        print(f"  {emp_id!s:>6} : {format_hours(hours)}", file=stream)
    if len(shown) < len(items):
        print(f"  … {len(items) - len(shown)} more", file=stream)

    hrs = np.asarray([h for _, h in items], dtype=float)
    print(
        "Hours distribution across employees: "
        f"total={_fmt_float(float(hrs.sum()))} | "
        f"mean={_fmt_float(float(hrs.mean()))} | "
        f"min={_fmt_float(float(hrs.min()))} | max={_fmt_float(float(hrs.max()))} | "
        f"zero-hour employees={int((hrs == 0).sum())}",
        file=stream,
    )


def render_diagnostic_report(
    report: DiagnosticReport,
    *,
    config: Config | None = None,
    stream: TextIO | None = None,
) -> None:
    """Print the full pre-flight report for an operator."""
    stream = stream or sys.stdout
    print_hours_checks(report.hours_checks, stream=stream)
    if report.inspection is not None:
        print_inspection(report.inspection, config=config, stream=stream)
    for err in report.errors:
        print(f"❌ {err}", file=stream)
    print(
        "ℹ️  Diagnostics are advisory; they do not change the exported data.",
        file=stream,
    )
