"""
Decide which calendar day a shift belongs to.

A shift names its day either by calendar date (authoritative) or by an
English weekday name. The two are modelled as separate reference kinds so
the fallback order lives in one place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Optional, Union

import pandas as pd

from shifthours.config import Config, cfg
from shifthours.shift import Shift

logger = logging.getLogger(__name__)

# index 0 = Sunday
WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


@dataclass(frozen=True)
class ByDate:
    value: date


@dataclass(frozen=True)
class ByWeekdayName:
    name: str


DayReference = Union[ByDate, ByWeekdayName]


def weekday_index(d: date) -> int:
    """Sunday-based day of week (Sunday=0 ... Saturday=6)."""
    return (d.weekday() + 1) % 7


def weekday_name(d: date) -> str:
    return WEEKDAY_NAMES[weekday_index(d)]


def parse_shift_date(value: Any) -> Optional[date]:
    """Parse a shift's `date` field; None when it cannot be read as a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, (str, int, float)):
        return None
    try:
        ts = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None
    if ts is None or pd.isna(ts):
        return None
    return date(ts.year, ts.month, ts.day)


def day_reference(shift: Shift) -> Optional[DayReference]:
    """
    Return how `shift` names its day, or None when it names none.

    A present but unparseable `date` yields None: the `day` field is not
    consulted as a fallback.
    """
    if shift.date is not None and shift.date != "":
        parsed = parse_shift_date(shift.date)
        if parsed is None:
            logger.debug("Unparseable date %r on shift %s", shift.date, shift.id)
            return None
        return ByDate(parsed)
    if shift.day:
        return ByWeekdayName(shift.day)
    return None


def weekday_name_matches(
    name: str, target_name: str, *, config: Config | None = None
) -> bool:
    """
    Compare a free-form weekday name with an English weekday name.

    Tried in order: exact, case-insensitive, case-insensitive three-letter
    prefix ("mon" ~ "Monday"), then the configured alias table.
    """
    if name == target_name:
        return True
    lowered = name.lower()
    target_lower = target_name.lower()
    if lowered == target_lower or lowered == target_lower[:3]:
        return True
    C = config or cfg
    alias = C.DAY_NAME_ALIASES.get(lowered)
    return alias is not None and alias.lower() == target_lower


def matches_day(shift: Shift, target: date, *, config: Config | None = None) -> bool:
    """True when `shift` belongs to calendar day `target`. Never raises."""
    ref = day_reference(shift)
    if isinstance(ref, ByDate):
        return (ref.value.year, ref.value.month, ref.value.day) == (
            target.year,
            target.month,
            target.day,
        )
    if isinstance(ref, ByWeekdayName):
        return weekday_name_matches(ref.name, weekday_name(target), config=config)
    return False


def filter_shifts_by_day(
    shifts: Iterable[Shift] | None, target: date, *, config: Config | None = None
) -> list[Shift]:
    """Shifts matching `target`, in their original order."""
    out = [s for s in shifts or () if matches_day(s, target, config=config)]
    logger.debug("%d shift(s) on %s", len(out), target.isoformat())
    return out
