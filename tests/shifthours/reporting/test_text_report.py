from __future__ import annotations

from shifthours.config import Config
from shifthours.diagnostics import inspect_schedule, run_hours_checks
from shifthours.reporting.data_models import DiagnosticReport, HoursCheckCase
from shifthours.reporting.text_report import (
    print_hours_checks,
    print_inspection,
    render_diagnostic_report,
)
from shifthours.shift import Employee, Shift


def test_print_hours_checks_marks_each_case(capsys):
    results = run_hours_checks(
        [HoursCheckCase("04:00", "06:00", 2.0), HoursCheckCase("22:00", "02:00", 3.0)]
    )
    print_hours_checks(results)
    out = capsys.readouterr().out
    assert "✅ 04:00-06:00 | expected 2.00h | actual 2.00h" in out
    assert "❌ 22:00-02:00 | expected 3.00h | actual 4.00h" in out
    assert "1 of 2 checks failed" in out


def test_render_diagnostic_report_prints_summary(capsys, week, employees, week_shifts):
    report = DiagnosticReport(
        hours_checks=run_hours_checks(),
        inspection=inspect_schedule(week, week_shifts, employees),
    )
    render_diagnostic_report(report)
    out = capsys.readouterr().out
    assert "All 4 hours checks passed." in out
    assert "Period: 01/01/2024 - 07/01/2024" in out
    assert "Fields present: date=yes, day=yes, employeeId=yes, userId=yes" in out
    assert "✅ All 2 referenced employee id(s) are known." in out
    assert "Wednesday :   1" in out
    assert "8h" in out
    assert "advisory" in out


def test_print_inspection_reports_problems(capsys, week):
    shifts = [
        Shift(employee_id=7, day="Monday", start_time="08:00", end_time="12:30"),
        Shift(start_time="08:00", end_time="12:00"),
    ]
    insp = inspect_schedule(week, shifts, [Employee(id=1)])
    print_inspection(insp)
    out = capsys.readouterr().out
    assert "unknown: 7" in out
    assert "1 shift(s) have neither employeeId nor userId" in out
    assert "1 shift(s) have no readable date/day" in out
    assert "zero-hour employees=1" in out


def test_print_inspection_limits_employee_listing(capsys, week):
    employees = [Employee(id=i) for i in range(5)]
    insp = inspect_schedule(week, [], employees)
    print_inspection(insp, config=Config(MAX_REPORTED_EMPLOYEES=2))
    out = capsys.readouterr().out
    assert "… 3 more" in out


def test_render_reports_errors(capsys):
    report = DiagnosticReport(
        hours_checks=[], errors=["Schedule inspection skipped: x"]
    )
    render_diagnostic_report(report)
    out = capsys.readouterr().out
    assert "❌ Schedule inspection skipped: x" in out


def test_print_hours_checks_with_non_numeric_expected(capsys):
    results = run_hours_checks([HoursCheckCase("08:00", "10:00", "two")])
    print_hours_checks(results)
    out = capsys.readouterr().out
    assert "❌ 08:00-10:00 | expected nanh | actual 2.00h" in out
    assert "error: expected value 'two'" in out
    assert "1 of 1 checks failed" in out
