# backend/teesheet/services/teetimes/config.py
"""
Tee sheet configuration: operating window, interval and slot defaults.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

from ...config import settings

_LABEL_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])\s*$")
_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def time_str_to_minutes(value: str) -> int:
    """
    Parse "HH:MM" (24h) or a label like "7:00 AM" into minutes after midnight.

    Raises ValueError on anything else.
    """
    match = _LABEL_RE.match(value)
    if match:
        hour, minute, meridiem = int(match.group(1)), int(match.group(2)), match.group(3).upper()
        if not 1 <= hour <= 12 or minute > 59:
            raise ValueError(f"Invalid time: {value!r}")
        hour = hour % 12
        if meridiem == "PM":
            hour += 12
        return hour * 60 + minute

    match = _CLOCK_RE.match(value)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour > 23 or minute > 59:
            raise ValueError(f"Invalid time: {value!r}")
        return hour * 60 + minute

    raise ValueError(f"Invalid time: {value!r}")


def minutes_to_label(total_minutes: int) -> str:
    """Convert minutes after midnight to a label: 420 → "7:00 AM"."""
    hour, minute = divmod(total_minutes, 60)
    meridiem = "AM" if hour < 12 else "PM"
    hour12 = hour % 12 or 12
    return f"{hour12}:{minute:02d} {meridiem}"


def normalize_time_label(value: str) -> str:
    return minutes_to_label(time_str_to_minutes(value))


@dataclass(frozen=True)
class TeeSheetConfig:
    """
    Configuration of the daily tee sheet.

    Attributes:
        first_tee_minute: First tee time, minutes after midnight (inclusive)
        last_tee_minute: End of the window, minutes after midnight (exclusive)
        interval_minutes: Gap between consecutive tee times
        max_players: Default capacity of a generated slot
        price: Default price of a generated slot
        course: Course name stamped on generated slots
    """
    first_tee_minute: int = 7 * 60
    last_tee_minute: int = 19 * 60
    interval_minutes: int = 15
    max_players: int = 4
    price: Decimal = Decimal("85.00")
    course: str = "Packanack Golf Course"

    def __post_init__(self):
        if self.interval_minutes <= 0 or 60 % self.interval_minutes:
            raise ValueError(
                f"interval_minutes must be a positive divisor of 60, got {self.interval_minutes}"
            )
        if not 0 <= self.first_tee_minute < self.last_tee_minute <= 24 * 60:
            raise ValueError("Tee sheet window is empty or outside the day")
        if self.max_players < 1:
            raise ValueError(f"max_players must be at least 1, got {self.max_players}")

    @property
    def slots_per_day(self) -> int:
        """7:00-19:00 at 15 minutes → 48 slots."""
        span = self.last_tee_minute - self.first_tee_minute
        return -(-span // self.interval_minutes)

    def tee_times(self) -> list[tuple[int, str]]:
        """Ordered (start_minute, label) pairs for one day."""
        return [
            (minute, minutes_to_label(minute))
            for minute in range(self.first_tee_minute, self.last_tee_minute, self.interval_minutes)
        ]


@lru_cache
def get_tee_sheet_config() -> TeeSheetConfig:
    """Tee sheet configuration built from settings (singleton)."""
    return TeeSheetConfig(
        first_tee_minute=time_str_to_minutes(settings.first_tee_time),
        last_tee_minute=time_str_to_minutes(settings.last_tee_time),
        interval_minutes=settings.tee_interval_minutes,
        max_players=settings.max_players,
        price=settings.default_price,
        course=settings.course_name,
    )
