from __future__ import annotations

import json
from pathlib import Path

import pytest

from shifthours import diagnostics
from shifthours.main import load_payload, main, run_preflight
from shifthours.reporting.data_models import HoursCheckCase

PAYLOAD = {
    "schedule": {"id": 1, "startDate": "2024-01-01", "endDate": "2024-01-07"},
    "employees": [
        {"id": 1, "firstName": "Anna", "lastName": "Rossi"},
        {"id": 2, "firstName": "Marco", "lastName": "Bianchi"},
    ],
    "shifts": [
        {
            "employeeId": 1,
            "day": "Monday",
            "startTime": "08:00",
            "endTime": "16:00",
            "type": "work",
        },
        {
            "userId": 2,
            "date": "2024-01-03",
            "startTime": "22:00",
            "endTime": "06:00",
            "type": "work",
        },
    ],
}


def write_payload(tmp_path: Path, payload: object, name: str = "schedule.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_run_preflight_end_to_end(capsys):
    result = run_preflight(PAYLOAD["schedule"], PAYLOAD["shifts"], PAYLOAD["employees"])
    assert result.employee_hours == {1: 8.0, 2: 8.0}
    assert len(result.shifts_per_day["Monday"]) == 1
    assert len(result.shifts_per_day["Wednesday"]) == 1
    assert result.report.all_checks_passed
    assert result.grid.loc[2, "Total"] == "8h"
    assert result.daily_hours.loc[2, "Wednesday"] == 8.0
    assert result.daily_hours.loc[1, "total"] == 8.0
    assert [s.employee_id for s in result.shifts] == [1, 2]
    assert result.shifts[1].user_id == 2
    assert "Hours calculation checks" in capsys.readouterr().out


def test_run_preflight_quiet(capsys):
    run_preflight(PAYLOAD["schedule"], [], [], verbose=False)
    assert capsys.readouterr().out == ""


def test_load_payload(tmp_path):
    payload = load_payload(write_payload(tmp_path, PAYLOAD))
    assert payload.period.start_date.isoformat() == "2024-01-01"
    assert [e.id for e in payload.employees] == [1, 2]
    assert payload.shifts[1].user_id == 2


def test_load_payload_allows_missing_lists(tmp_path):
    payload = load_payload(write_payload(tmp_path, {"schedule": PAYLOAD["schedule"]}))
    assert payload.shifts == [] and payload.employees == []


def test_load_payload_errors(tmp_path):
    with pytest.raises(ValueError):
        load_payload(tmp_path / "schedule.txt")
    with pytest.raises(FileNotFoundError):
        load_payload(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_payload(bad)

    with pytest.raises(TypeError):
        load_payload(write_payload(tmp_path, [1, 2], "list.json"))
    with pytest.raises(ValueError):
        load_payload(write_payload(tmp_path, {"shifts": []}, "noschedule.json"))
    with pytest.raises(TypeError):
        load_payload(
            write_payload(
                tmp_path,
                {"schedule": PAYLOAD["schedule"], "shifts": {"a": 1}},
                "shiftsdict.json",
            )
        )


def test_main_prints_report_and_grid(tmp_path, capsys):
    code = main([str(write_payload(tmp_path, PAYLOAD))])
    out = capsys.readouterr().out
    assert code == 0
    assert "All 4 hours checks passed." in out
    assert "Weekly schedule" in out
    assert "Anna Rossi" in out


def test_main_no_grid(tmp_path, capsys):
    main([str(write_payload(tmp_path, PAYLOAD)), "--no-grid"])
    assert "Weekly schedule" not in capsys.readouterr().out


def test_main_strict_fails_on_bad_check(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(
        diagnostics, "DEFAULT_HOURS_CASES", (HoursCheckCase("22:00", "02:00", 3.0),)
    )
    path = str(write_payload(tmp_path, PAYLOAD))
    assert main([path, "--strict"]) == 1
    assert main([path]) == 0


def test_example_schedule_file(project_root):
    payload = load_payload(project_root / "src" / "example_schedule.json")
    result = run_preflight(
        payload.period, payload.shifts, payload.employees, verbose=False
    )
    assert result.employee_hours == {1: 12.5, 2: 8.0, 3: 4.0}
    assert result.report.inspection is not None
    assert result.report.inspection.unattributed_shift_count == 1
    assert len(result.shifts_per_day["Friday"]) == 1
