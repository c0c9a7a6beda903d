"""
Parsing and formatting of "HH:mm" times of day.

Everything here works on plain strings and minute counts; no datetime
objects are involved. Invalid text is reported as ``None``, never raised.
"""

import re
from dataclasses import dataclass

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MINUTES_PER_DAY = HOURS_PER_DAY * MINUTES_PER_HOUR
MAX_MINUTE_OF_DAY = MINUTES_PER_DAY - 1  # 23:59

START_OF_DAY = "00:00"
END_OF_DAY = "23:59"

TIME_FORMAT_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


@dataclass(frozen=True)
class TimeOfDay:
    """A validated time of day, 00:00 through 23:59."""
    hour: int
    minute: int

    def total_minutes(self) -> int:
        """Return minutes since midnight."""
        return self.hour * MINUTES_PER_HOUR + self.minute

    def __str__(self) -> str:
        return format_time(self.hour, self.minute)


def parse_time(text) -> TimeOfDay | None:
    """
    Parse a strict zero-padded "HH:mm" string.

    Anything that is not a string, or does not match the 24-hour pattern
    exactly ("9:00", "24:00", "12:60", " 12:00"), yields None.
    """
    if not isinstance(text, str):
        return None

    match = TIME_FORMAT_PATTERN.fullmatch(text)
    if match is None:
        return None

    return TimeOfDay(hour=int(match.group(1)), minute=int(match.group(2)))


def is_hhmm(text) -> bool:
    """Check whether text is a valid "HH:mm" time."""
    return parse_time(text) is not None


def format_time(hour: int, minute: int) -> str:
    """Zero-pad hour and minute into "HH:mm". The range is not checked."""
    return f"{hour:02d}:{minute:02d}"


def to_minutes(time: TimeOfDay) -> int:
    """Convert a TimeOfDay to minutes since midnight."""
    return time.total_minutes()


def from_minutes(total: int) -> TimeOfDay:
    """Convert minutes since midnight to a TimeOfDay, clamped to 00:00..23:59."""
    clamped = max(0, min(MAX_MINUTE_OF_DAY, int(total)))
    hour, minute = divmod(clamped, MINUTES_PER_HOUR)
    return TimeOfDay(hour=hour, minute=minute)


def time_to_minutes(text) -> int | None:
    """Parse "HH:mm" text straight to minutes, or None when invalid."""
    parsed = parse_time(text)
    if parsed is None:
        return None
    return parsed.total_minutes()


def compare_times(a, b) -> int:
    """
    Compare two "HH:mm" strings by minute value.

    Returns -1, 0 or 1. If either side fails to parse the pair is treated
    as equal (0), so sorting malformed input keeps its relative order.
    """
    a_minutes = time_to_minutes(a)
    b_minutes = time_to_minutes(b)

    if a_minutes is None or b_minutes is None:
        return 0

    if a_minutes < b_minutes:
        return -1
    if a_minutes > b_minutes:
        return 1
    return 0


def is_start_of_day(text) -> bool:
    return text == START_OF_DAY


def is_end_of_day(text) -> bool:
    return text == END_OF_DAY


def is_minimum_duration(start, end, minimum: int = 1) -> bool:
    """Check that end lies at least ``minimum`` minutes after start."""
    start_minutes = time_to_minutes(start)
    end_minutes = time_to_minutes(end)
    if start_minutes is None or end_minutes is None:
        return False
    return end_minutes - start_minutes >= minimum
