from __future__ import annotations

from .data_models import (
    DiagnosticReport,
    HoursCheckCase,
    HoursCheckResult,
    ScheduleInspection,
)
from .grid import weekly_grid
from .text_report import render_diagnostic_report

__all__ = [
    "DiagnosticReport",
    "HoursCheckCase",
    "HoursCheckResult",
    "ScheduleInspection",
    "render_diagnostic_report",
    "weekly_grid",
]
