from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

from shifthours.shift import Shift


def resolve_employee_id(shift: Shift) -> Optional[int]:
    """
    Canonical employee id for a shift.

    Records carry the owner under `employee_id` or the older `user_id`;
    `employee_id` wins when both are set. 0 is a valid id.
    """
    if shift.employee_id is not None:
        return shift.employee_id
    return shift.user_id


def normalize_employee_refs(shifts: Iterable[Shift] | None) -> list[Shift]:
    """
    Copies of `shifts` whose `employee_id` holds the resolved owner.
    Shifts that already carry it, or have no owner, are returned as is.
    """
    out: list[Shift] = []
    for s in shifts or ():
        owner = resolve_employee_id(s)
        out.append(s if owner == s.employee_id else replace(s, employee_id=owner))
    return out
