from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from shifthours.shift import Employee, SchedulePeriod, Shift


@dataclass(frozen=True)
class HoursCheckCase:
    """Known-answer probe for the duration arithmetic."""

    start_time: str
    end_time: str
    expected: float


@dataclass(frozen=True)
class HoursCheckResult:
    """A probe with the computed value and its verdict."""

    start_time: str
    end_time: str
    expected: float
    actual: float
    passed: bool  # abs(actual - expected) < tolerance
    error: Optional[str] = None


@dataclass(frozen=True)
class ScheduleInspection:
    """Structural read of a (schedule, shifts, employees) triple."""

    shift_count: int
    employee_count: int
    has_date_field: bool
    has_day_field: bool
    has_employee_id: bool
    has_user_id: bool
    matching_ids_count: int  # distinct resolved ids that name a known employee
    unknown_employee_ids: list[int]
    unattributed_shift_count: int
    unmatched_day_count: int
    shifts_per_day: dict[str, list[Shift]]
    employee_hours: dict[int, float]
    first_shift: Optional[Shift]
    first_employee: Optional[Employee]
    period: Optional[SchedulePeriod]


@dataclass
class DiagnosticReport:
    """Outcome of one pre-flight run. Advisory only."""

    hours_checks: list[HoursCheckResult]
    inspection: Optional[ScheduleInspection] = None
    errors: list[str] = field(default_factory=list)

    @property
    def all_checks_passed(self) -> bool:
        return all(r.passed for r in self.hours_checks)

    @property
    def failed_checks(self) -> list[HoursCheckResult]:
        return [r for r in self.hours_checks if not r.passed]
