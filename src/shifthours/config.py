from dataclasses import dataclass, field
from typing import Optional

ITALIAN_DAY_NAMES: dict[str, str] = {
    "lunedì": "Monday",
    "martedì": "Tuesday",
    "mercoledì": "Wednesday",
    "giovedì": "Thursday",
    "venerdì": "Friday",
    "sabato": "Saturday",
    "domenica": "Sunday",
    # unaccented spellings
    "lunedi": "Monday",
    "martedi": "Tuesday",
    "mercoledi": "Wednesday",
    "giovedi": "Thursday",
    "venerdi": "Friday",
}


@dataclass
class Config:

    # Day-bucketing window, counted from SchedulePeriod.start_date
    WINDOW_DAYS: int = 7

    # Decimal places kept on shift durations and totals
    ROUND_DIGITS: int = 2

    # Shift types counted toward hour totals (None/"" always counts)
    WORK_TYPES: tuple[str, ...] = ("work",)

    ### DIAGNOSTICS ###

    # Absolute tolerance (hours) for the known-answer hours checks
    CHECK_TOLERANCE: float = 0.01

    # Lowercased non-English weekday name -> English weekday name
    DAY_NAME_ALIASES: dict[str, str] = field(
        default_factory=lambda: dict(ITALIAN_DAY_NAMES)
    )

    # Weekly grid cell codes for non-work shift types
    LEGEND_CODES: dict[str, str] = field(
        default_factory=lambda: {"work": "X", "vacation": "F", "leave": "P"}
    )

    # Employees listed in detail by the text report (None = all)
    MAX_REPORTED_EMPLOYEES: Optional[int] = None

    def validate(self) -> None:
        """
        Validate the Config object has sensible values before aggregating.
        """
        if not (1 <= self.WINDOW_DAYS <= 7):
            raise ValueError("WINDOW_DAYS must be within [1, 7].")
        if not (0 <= self.ROUND_DIGITS <= 6):
            raise ValueError("ROUND_DIGITS must be within [0, 6].")
        if not self.WORK_TYPES:
            raise ValueError("WORK_TYPES must name at least one shift type.")
        if self.CHECK_TOLERANCE <= 0.0:
            raise ValueError("CHECK_TOLERANCE must be > 0.")
        for alias, target in self.DAY_NAME_ALIASES.items():
            if alias != alias.lower():
                raise ValueError(f"DAY_NAME_ALIASES key {alias!r} must be lowercase.")
            if not target:
                raise ValueError(f"DAY_NAME_ALIASES[{alias!r}] must not be empty.")
        if (
            self.MAX_REPORTED_EMPLOYEES is not None
            and self.MAX_REPORTED_EMPLOYEES <= 0
        ):
            raise ValueError("MAX_REPORTED_EMPLOYEES must be > 0 or None.")


cfg = Config()
