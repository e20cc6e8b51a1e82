from __future__ import annotations

from typing import Any, Mapping

import pandas as pd

from shifthours.aggregation import (
    EmployeeInput,
    ShiftInput,
    is_work_shift,
    per_employee_hours,
    shifts_per_day,
)
from shifthours.config import Config, cfg
from shifthours.identifiers import resolve_employee_id
from shifthours.shift import SchedulePeriod, Shift, coerce_employees, coerce_shifts
from shifthours.timecalc import format_hours, to_decimal_hours


def cell_label(shift: Shift, *, config: Config | None = None) -> str:
    """Time range for work shifts, legend code (F, P, ...) otherwise."""
    C = config or cfg
    if is_work_shift(shift, config=C):
        return f"{shift.start_time or '?'}-{shift.end_time or '?'}"
    return C.LEGEND_CODES.get(str(shift.type), str(shift.type))


def _start_key(shift: Shift) -> float:
    # untimed entries (vacation, leave) sort first
    return to_decimal_hours(shift.start_time)


def weekly_grid(
    period: SchedulePeriod | Mapping[str, Any],
    shifts: ShiftInput,
    employees: EmployeeInput,
    *,
    config: Config | None = None,
) -> pd.DataFrame:
    """
    Export-ready table: one row per employee, one column per window day,
    and a `Total` column with the employee's formatted weekly work hours.
    Cells hold the employee's shifts for that day, earliest start first,
    joined by " / ".
    """
    C = config or cfg
    shift_list = coerce_shifts(shifts)
    emp_list = coerce_employees(employees)
    buckets = shifts_per_day(period, shift_list, config=C)
    totals = per_employee_hours(emp_list, shift_list, config=C)

    rows: list[dict[str, str]] = []
    for emp in emp_list:
        row = {"Employee": emp.full_name}
        for name, day_shifts in buckets.items():
            row[name] = " / ".join(
                cell_label(s, config=C)
                for s in sorted(day_shifts, key=_start_key)
                if resolve_employee_id(s) == emp.id
            )
        row["Total"] = format_hours(totals[emp.id])
        rows.append(row)

    columns = ["Employee", *buckets.keys(), "Total"]
    df = pd.DataFrame(rows, columns=columns, index=[e.id for e in emp_list])
    df.index.name = "employee_id"
    return df
