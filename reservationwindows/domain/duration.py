"""
Bounds for the reservation duration field.

- below the minimum, NaN, infinity, empty or non-numeric -> None
- above the maximum -> clamped to the maximum
- fractional minutes -> floored

Strings are trimmed and stripped of everything except digits, dots and
minus signs; the leading number of what remains is used, so "1-2" reads
as 1 and "1.2.3" as 1.2.
"""

import math
import re

MIN_DURATION_MINUTES = 5
MAX_DURATION_MINUTES = 1440

_NON_NUMERIC = re.compile(r"[^\d.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def _parse_value(value) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return None

    cleaned = _NON_NUMERIC.sub("", value.strip())
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return None
    return float(match.group())


def sanitize_duration(
    value,
    min_minutes: int = MIN_DURATION_MINUTES,
    max_minutes: int = MAX_DURATION_MINUTES
) -> int | None:
    """
    Coerce user input into a duration in whole minutes.

    Args:
        value: Raw field value (string or number)
        min_minutes: Smallest accepted duration
        max_minutes: Largest duration; larger values are clamped to it

    Returns:
        Duration in minutes, or None if the value cannot be used
    """
    parsed = _parse_value(value)
    if parsed is None or not math.isfinite(parsed):
        return None
    if parsed < min_minutes:
        return None
    if parsed > max_minutes:
        return max_minutes
    return math.floor(parsed)


def is_valid_duration(
    value,
    min_minutes: int = MIN_DURATION_MINUTES,
    max_minutes: int = MAX_DURATION_MINUTES
) -> bool:
    """Check for an integer duration within bounds, without any coercion."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return min_minutes <= value <= max_minutes
