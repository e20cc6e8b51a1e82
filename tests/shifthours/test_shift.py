from __future__ import annotations

from datetime import date, datetime

import pytest

from shifthours.shift import (
    Employee,
    SchedulePeriod,
    Shift,
    coerce_employees,
    coerce_period,
    coerce_shifts,
)


def test_shift_from_record_reads_wire_field_names() -> None:
    shift = Shift.from_record(
        {
            "id": 7,
            "employeeId": 3,
            "userId": 4,
            "date": "2024-01-03",
            "startTime": "22:00",
            "endTime": "06:00",
            "type": "work",
            "notes": "night",
        }
    )
    assert shift.id == 7
    assert shift.employee_id == 3
    assert shift.user_id == 4
    assert shift.date == "2024-01-03"
    assert (shift.start_time, shift.end_time) == ("22:00", "06:00")
    assert shift.day is None
    assert shift.notes == "night"


def test_shift_from_record_treats_null_as_absent() -> None:
    shift = Shift.from_record({"startTime": "08:00", "endTime": "12:00", "type": None})
    assert shift.type is None
    assert shift.employee_id is None and shift.user_id is None


def test_shift_to_record_omits_unset_fields() -> None:
    shift = Shift(
        employee_id=1, date=date(2024, 1, 1), start_time="08:00", end_time="16:00"
    )
    assert shift.to_record() == {
        "employeeId": 1,
        "date": "2024-01-01",
        "startTime": "08:00",
        "endTime": "16:00",
    }


def test_shift_from_record_rejects_non_mapping() -> None:
    with pytest.raises(TypeError):
        Shift.from_record(["08:00", "16:00"])  # type: ignore[arg-type]


def test_employee_from_record_and_full_name() -> None:
    emp = Employee.from_record({"id": 2, "firstName": "Marco", "lastName": "Bianchi"})
    assert emp.id == 2
    assert emp.full_name == "Marco Bianchi"
    assert Employee(id=9).full_name == "Employee 9"


def test_employee_from_record_requires_id() -> None:
    with pytest.raises(ValueError):
        Employee.from_record({"firstName": "Nobody"})


def test_schedule_period_parses_and_validates_dates() -> None:
    period = SchedulePeriod.from_record(
        {"id": 1, "startDate": "2024-01-01", "endDate": "2024-01-07T00:00:00Z"}
    )
    assert period.start_date == date(2024, 1, 1)
    assert period.end_date == date(2024, 1, 7)
    assert period.is_published is False

    assert SchedulePeriod(datetime(2024, 1, 1, 9), date(2024, 1, 1)).start_date == date(
        2024, 1, 1
    )

    with pytest.raises(ValueError):
        SchedulePeriod(start_date=date(2024, 1, 8), end_date=date(2024, 1, 7))
    with pytest.raises(ValueError):
        SchedulePeriod.from_record({"startDate": "2024-01-01"})


def test_schedule_period_days_ignores_end_date() -> None:
    period = SchedulePeriod(start_date=date(2024, 1, 1), end_date=date(2024, 1, 1))
    days = period.days()
    assert len(days) == 7
    assert days[0] == date(2024, 1, 1)
    assert days[-1] == date(2024, 1, 7)


def test_coerce_helpers_accept_objects_records_and_none() -> None:
    existing = Shift(employee_id=1)
    shifts = coerce_shifts([existing, {"userId": 2}])
    assert shifts[0] is existing
    assert shifts[1].user_id == 2
    assert coerce_shifts(None) == []
    assert coerce_employees(None) == []
    assert coerce_employees([{"id": 1}])[0].id == 1
    period = coerce_period({"startDate": "2024-01-01", "endDate": "2024-01-07"})
    assert period.end_date == date(2024, 1, 7)
