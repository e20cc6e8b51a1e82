from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

import pandas as pd

from shifthours.config import Config, cfg
from shifthours.day_matching import day_reference, filter_shifts_by_day, weekday_name
from shifthours.identifiers import resolve_employee_id
from shifthours.shift import (
    Employee,
    SchedulePeriod,
    Shift,
    coerce_employees,
    coerce_period,
    coerce_shifts,
)
from shifthours.timecalc import duration, round_half_up

logger = logging.getLogger(__name__)

ShiftInput = Iterable[Shift | Mapping[str, Any]] | None
EmployeeInput = Iterable[Employee | Mapping[str, Any]] | None


def is_work_shift(shift: Shift, *, config: Config | None = None) -> bool:
    """Work-type shifts count toward hours; a missing type means work."""
    C = config or cfg
    return not shift.type or shift.type in C.WORK_TYPES


def shift_hours(shift: Shift, *, config: Config | None = None) -> float:
    C = config or cfg
    hours = duration(shift.start_time, shift.end_time, digits=C.ROUND_DIGITS)
    logger.debug(
        "Shift %s %s-%s: %.2f h", shift.id, shift.start_time, shift.end_time, hours
    )
    return hours


def total_hours(shifts: ShiftInput, *, config: Config | None = None) -> float:
    """
    Sum of work-shift durations.

    Overlapping or duplicate records add up; vacation and leave add nothing.
    """
    C = config or cfg
    total = 0.0
    for s in coerce_shifts(shifts):
        if is_work_shift(s, config=C):
            total += shift_hours(s, config=C)
    return round_half_up(total, C.ROUND_DIGITS)


def shifts_for_employee(shifts: ShiftInput, employee_id: int) -> list[Shift]:
    return [s for s in coerce_shifts(shifts) if resolve_employee_id(s) == employee_id]


def per_employee_hours(
    employees: EmployeeInput, shifts: ShiftInput, *, config: Config | None = None
) -> dict[int, float]:
    """
    Work hours per employee id. Every employee appears, with 0.0 when no
    shift resolves to them; shifts without an owner are ignored here.
    """
    shift_list = coerce_shifts(shifts)
    out: dict[int, float] = {}
    for emp in coerce_employees(employees):
        own = shifts_for_employee(shift_list, emp.id)
        out[emp.id] = total_hours(own, config=config)
    return out


def unattributed_shifts(shifts: ShiftInput) -> list[Shift]:
    """Shifts with neither `employee_id` nor `user_id`."""
    return [s for s in coerce_shifts(shifts) if resolve_employee_id(s) is None]


def unmatched_shifts(shifts: ShiftInput) -> list[Shift]:
    """Shifts that name no parseable day and so never land in a day bucket."""
    return [s for s in coerce_shifts(shifts) if day_reference(s) is None]


def shifts_per_day(
    period: SchedulePeriod | Mapping[str, Any],
    shifts: ShiftInput,
    *,
    config: Config | None = None,
) -> dict[str, list[Shift]]:
    """
    Bucket shifts by weekday name over the window starting at
    `period.start_date`. The window is always WINDOW_DAYS long, whatever
    `period.end_date` says. Keys follow window order.
    """
    C = config or cfg
    shift_list = coerce_shifts(shifts)
    out: dict[str, list[Shift]] = {}
    for day in coerce_period(period).days(C.WINDOW_DAYS):
        out[weekday_name(day)] = filter_shifts_by_day(shift_list, day, config=C)
    return out


def hours_by_day(
    employees: EmployeeInput,
    period: SchedulePeriod | Mapping[str, Any],
    shifts: ShiftInput,
    *,
    config: Config | None = None,
) -> pd.DataFrame:
    """
    Work hours per (employee, weekday) as a DataFrame indexed by employee id
    with one column per window day plus a `total` column.
    """
    C = config or cfg
    emp_list = coerce_employees(employees)
    buckets = shifts_per_day(period, shifts, config=C)
    columns = list(buckets.keys())

    rows: list[dict[str, float]] = []
    for emp in emp_list:
        row = {
            name: total_hours(shifts_for_employee(day_shifts, emp.id), config=C)
            for name, day_shifts in buckets.items()
        }
        rows.append(row)

    df = pd.DataFrame(
        rows, columns=columns, index=[e.id for e in emp_list], dtype=float
    )
    df.index.name = "employee_id"
    df["total"] = df[columns].sum(axis=1).round(C.ROUND_DIGITS) if columns else 0.0
    return df
