from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Mapping, Optional

def _to_date(value: Any, name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError as exc:
            raise ValueError(f"{name} is not an ISO date: {value!r}") from exc
    raise TypeError(f"{name} must be a date, datetime or ISO string.")


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(slots=True)
class Shift:
    """
    One scheduled interval, as supplied by the data-access layer.

    Either `date` or `day` ties the shift to a calendar day; either
    `employee_id` or `user_id` ties it to an employee.
    """

    start_time: Optional[str] = None
    end_time: Optional[str] = None
    type: Optional[str] = None
    date: Any = None
    day: Optional[str] = None
    employee_id: Optional[int] = None
    user_id: Optional[int] = None
    notes: Optional[str] = None
    id: Optional[int] = None
    area: Optional[str] = None

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> Shift:
        """Build a Shift from a camelCase record; absent keys become None."""
        if not isinstance(raw, Mapping):
            raise TypeError("Each shift entry must be an object/dict.")
        return cls(
            start_time=_optional_text(raw.get("startTime")),
            end_time=_optional_text(raw.get("endTime")),
            type=_optional_text(raw.get("type")),
            date=raw.get("date"),
            day=_optional_text(raw.get("day")),
            employee_id=raw.get("employeeId"),
            user_id=raw.get("userId"),
            notes=_optional_text(raw.get("notes")),
            id=raw.get("id"),
            area=_optional_text(raw.get("area")),
        )

    def to_record(self) -> dict[str, Any]:
        """Inverse of `from_record`, omitting unset fields."""
        out = {
            "id": self.id,
            "employeeId": self.employee_id,
            "userId": self.user_id,
            "date": (
                self.date.isoformat()
                if isinstance(self.date, (date, datetime))
                else self.date
            ),
            "day": self.day,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "type": self.type,
            "notes": self.notes,
            "area": self.area,
        }
        return {k: v for k, v in out.items() if v is not None}


@dataclass(slots=True)
class Employee:
    """Minimal identity needed to attribute hours."""

    id: int
    first_name: str = ""
    last_name: str = ""
    role: Optional[str] = None

    @property
    def full_name(self) -> str:
        name = f"{self.first_name} {self.last_name}".strip()
        return name or f"Employee {self.id}"

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> Employee:
        if not isinstance(raw, Mapping):
            raise TypeError("Each employee entry must be an object/dict.")
        if raw.get("id") is None:
            raise ValueError("Employee record is missing 'id'.")
        return cls(
            id=raw["id"],
            first_name=str(raw.get("firstName") or ""),
            last_name=str(raw.get("lastName") or ""),
            role=_optional_text(raw.get("role")),
        )


@dataclass(slots=True)
class SchedulePeriod:
    """Inclusive date range a set of shifts is reported against."""

    start_date: date
    end_date: date
    id: Optional[int] = None
    is_published: bool = False

    def __post_init__(self) -> None:
        self.start_date = _to_date(self.start_date, "start_date")
        self.end_date = _to_date(self.end_date, "end_date")
        if self.start_date > self.end_date:
            raise ValueError(
                f"start_date {self.start_date} is after end_date {self.end_date}."
            )

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> SchedulePeriod:
        if not isinstance(raw, Mapping):
            raise TypeError("Schedule must be an object/dict.")
        for key in ("startDate", "endDate"):
            if raw.get(key) is None:
                raise ValueError(f"Schedule record is missing '{key}'.")
        return cls(
            start_date=raw["startDate"],
            end_date=raw["endDate"],
            id=raw.get("id"),
            is_published=bool(raw.get("isPublished", False)),
        )

    def days(self, n: int = 7) -> list[date]:
        """`n` consecutive dates from start_date; end_date is not consulted."""
        return [self.start_date + timedelta(days=i) for i in range(n)]


def coerce_shifts(records: Iterable[Shift | Mapping[str, Any]] | None) -> list[Shift]:
    """Accept Shift objects or wire records; None means no shifts."""
    if records is None:
        return []
    return [r if isinstance(r, Shift) else Shift.from_record(r) for r in records]


def coerce_employees(
    records: Iterable[Employee | Mapping[str, Any]] | None,
) -> list[Employee]:
    if records is None:
        return []
    return [r if isinstance(r, Employee) else Employee.from_record(r) for r in records]


def coerce_period(value: SchedulePeriod | Mapping[str, Any]) -> SchedulePeriod:
    if isinstance(value, SchedulePeriod):
        return value
    return SchedulePeriod.from_record(value)
