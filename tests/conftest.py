# tests/conftest.py
from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from shifthours.shift import Employee, SchedulePeriod, Shift


# -----------------------------
# Path helpers
# -----------------------------
@pytest.fixture(scope="session")
def project_root() -> Path:
    """Repository root (where pyproject.toml lives)."""
    return Path(__file__).resolve().parents[1]


# -----------------------------
# Schedule fixtures
# -----------------------------
@pytest.fixture
def week() -> SchedulePeriod:
    """Monday 2024-01-01 to Sunday 2024-01-07."""
    return SchedulePeriod(start_date=date(2024, 1, 1), end_date=date(2024, 1, 7))


@pytest.fixture
def employees() -> list[Employee]:
    return [
        Employee(id=1, first_name="Anna", last_name="Rossi"),
        Employee(id=2, first_name="Marco", last_name="Bianchi"),
    ]


@pytest.fixture
def week_shifts() -> list[Shift]:
    """A day shift for employee 1 on Monday and a night shift for 2 on Wednesday."""
    return [
        Shift(
            employee_id=1,
            day="Monday",
            start_time="08:00",
            end_time="16:00",
            type="work",
        ),
        Shift(
            user_id=2,
            date="2024-01-03",
            start_time="22:00",
            end_time="06:00",
            type="work",
        ),
    ]
