"""
Domain layer - Pure reservation slot rules without external dependencies.
"""

from .boundaries import is_overnight_range, is_valid_range, validate_boundaries
from .error_keys import ErrorKey
from .limits import can_add_within_limit, is_at_limit, remaining_capacity
from .models import (
    WEEKDAYS,
    DayVerdict,
    DurationRules,
    PolicyResult,
    ReservationWeek,
    Slot,
    SlotIssue,
    SlotRules,
    WeekVerdict,
    Weekday,
)
from .normalization import normalize_slots
from .overlap import can_add_without_overlap, find_overlapping, is_strict_overlap
from .time_codec import TimeOfDay, compare_times, format_time, from_minutes, parse_time, to_minutes
from .validator import ReservationValidator, validate_day_slots, validate_week

__all__ = [
    "WEEKDAYS",
    "DayVerdict",
    "DurationRules",
    "ErrorKey",
    "PolicyResult",
    "ReservationValidator",
    "ReservationWeek",
    "Slot",
    "SlotIssue",
    "SlotRules",
    "TimeOfDay",
    "WeekVerdict",
    "Weekday",
    "can_add_within_limit",
    "can_add_without_overlap",
    "compare_times",
    "find_overlapping",
    "format_time",
    "from_minutes",
    "is_at_limit",
    "is_overnight_range",
    "is_strict_overlap",
    "is_valid_range",
    "normalize_slots",
    "parse_time",
    "remaining_capacity",
    "to_minutes",
    "validate_boundaries",
    "validate_day_slots",
    "validate_week",
]
