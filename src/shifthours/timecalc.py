"""
Time-of-day arithmetic for shift records.

Times are ``"HH:MM"`` strings on a 24-hour clock with no timezone. A shift
whose end is numerically earlier than its start ends on the following day.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

# optional sign, ASCII digits only
_INT_FIELD = re.compile(r"[+-]?[0-9]+\Z")


class InvalidTimeFormat(ValueError):
    """Raised when a time-of-day string is not two integer fields split by ':'."""


def round_half_up(value: float, digits: int = 2) -> float:
    """Round to `digits` decimals, halves away from zero (0.125 -> 0.13)."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def to_minutes(time: Any) -> int:
    """
    Convert ``"HH:MM"`` into minutes after midnight.

    The hour is not range-checked: ``"25:00"`` gives 1500 and ``"-1:30"``
    gives -30.
    """
    if not isinstance(time, str):
        raise InvalidTimeFormat(f"Expected 'HH:MM' text, got {type(time).__name__}.")
    parts = time.split(":")
    if len(parts) != 2:
        raise InvalidTimeFormat(f"Expected 'HH:MM', got {time!r}.")
    if not all(_INT_FIELD.match(p) for p in parts):
        raise InvalidTimeFormat(f"Non-numeric time component in {time!r}.")
    hours, minutes = int(parts[0]), int(parts[1])
    return hours * MINUTES_PER_HOUR + minutes


def duration(start: Any, end: Any, *, digits: int = 2) -> float:
    """
    Elapsed hours between two times of day, wrapping past midnight.

    Malformed or missing times yield 0.0 so a single bad record does not
    abort an aggregation. Equal start and end give 0.0, not 24.
    """
    try:
        diff = to_minutes(end) - to_minutes(start)
    except InvalidTimeFormat as exc:
        logger.debug("Zero duration for %r-%r: %s", start, end, exc)
        return 0.0
    if diff < 0:
        diff += MINUTES_PER_DAY
    return round_half_up(diff / MINUTES_PER_HOUR, digits)


def to_decimal_hours(time: Any) -> float:
    """``"09:30"`` -> 9.5; malformed input -> 0.0."""
    try:
        return to_minutes(time) / MINUTES_PER_HOUR
    except InvalidTimeFormat:
        return 0.0


def format_hours(hours: float | None) -> str:
    """
    Render decimal hours as ``"7h 30m"`` (or ``"7h"`` for whole hours).

    Whole hours are truncated first and only the remaining fraction is
    rounded to minutes, so 1.99 renders as ``"1h 59m"``. None, NaN and
    infinities render as ``"0h"``. Minutes are never carried into the hour:
    1.999 renders as ``"1h 60m"``.
    """
    if hours is None:
        return "0h"
    value = float(hours)
    if not math.isfinite(value) or value == 0:
        return "0h"

    whole = math.floor(value)
    minutes = int(round_half_up((value - whole) * MINUTES_PER_HOUR, 0))
    if minutes == 0:
        return f"{whole}h"
    return f"{whole}h {minutes}m"
