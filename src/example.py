"""
Module with example code for running the shift hours pre-flight.

There are two ways to run the code:

1. Run with a schedule defined via code.
2. Run with a schedule pre-defined in a JSON file (typical production use).

Usage via cli:
    python3 -m src.example --option 1
"""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

from shifthours import Config, Employee, SchedulePeriod, Shift, run_preflight
from shifthours.main import load_payload
from shifthours.timecalc import format_hours

cfg = Config(
    WINDOW_DAYS=7,
    CHECK_TOLERANCE=0.01,
    MAX_REPORTED_EMPLOYEES=20,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run shift hours examples.")
    parser.add_argument(
        "--option",
        type=int,
        default=2,
        choices=(1, 2),
        help="Example scenario to run (default: 2).",
    )
    return parser.parse_args()


def run_option(option: int) -> None:
    print(f"Running example code with option {option}")

    if option == 1:
        period = SchedulePeriod(start_date=date(2024, 1, 1), end_date=date(2024, 1, 7))
        employees = [
            Employee(id=1, first_name="Anna", last_name="Rossi"),
            Employee(id=2, first_name="Marco", last_name="Bianchi"),
        ]
        shifts = [
            Shift(
                employee_id=1,
                day="Monday",
                start_time="08:00",
                end_time="16:00",
                type="work",
            ),
            # night shift referenced through the legacy userId field
            Shift(
                user_id=2,
                date=date(2024, 1, 3),
                start_time="22:00",
                end_time="06:00",
                type="work",
            ),
        ]
        result = run_preflight(period, shifts, employees, config=cfg)

    elif option == 2:
        payload = load_payload(Path("src/example_schedule.json"))
        result = run_preflight(
            payload.period, payload.shifts, payload.employees, config=cfg
        )
    else:
        raise SystemExit(f"Unknown option {option}")

    print("\nWeekly schedule:\n")
    print(result.grid.to_string(index=False))
    for emp_id, hours in result.employee_hours.items():
        print(f"employee {emp_id}: {format_hours(hours)}")


def main() -> None:
    args = parse_args()
    run_option(args.option)


if __name__ == "__main__":
    main()
