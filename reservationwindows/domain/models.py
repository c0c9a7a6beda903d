"""
Domain models for reservation slots, weekdays and validation verdicts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Sequence, Tuple

from .duration import MAX_DURATION_MINUTES, MIN_DURATION_MINUTES
from .error_keys import ErrorKey

# A slot is a ("HH:mm", "HH:mm") pair; any two-item sequence is accepted on input.
Slot = Tuple[str, str]
ReservationWeek = Dict[str, List[Slot]]
WeekInput = Mapping[str, Sequence[Sequence[str]]]

MAX_SLOTS_PER_DAY = 3
MIN_SLOT_DURATION_MINUTES = 1

DEFAULT_SLOT_START = "09:00"
DEFAULT_SLOT_END = "17:00"
DEFAULT_SLOT: Slot = (DEFAULT_SLOT_START, DEFAULT_SLOT_END)


class Weekday(str, Enum):
    """Days of the reservation week. The week starts on Saturday."""
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Weekday":
        """
        Resolve a weekday from its name, case-insensitively.

        Raises:
            ValueError: If name is not one of the seven weekdays
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown weekday: '{name}'. "
                f"Expected one of: {', '.join(day.value for day in cls)}"
            ) from None


WEEKDAYS: Tuple[Weekday, ...] = tuple(Weekday)


def slot_bounds(slot: Sequence[str]) -> Slot:
    """Return (start, end) of a slot; missing entries come back as empty strings."""
    start = slot[0] if len(slot) > 0 else ""
    end = slot[1] if len(slot) > 1 else ""
    return start, end


def clone_slot(slot: Sequence[str]) -> Slot:
    """Copy a slot into a fresh tuple."""
    return slot_bounds(slot)


@dataclass(frozen=True)
class SlotRules:
    """
    Business rules applied to every day of the reservation week.
    """
    max_slots_per_day: int = MAX_SLOTS_PER_DAY
    min_duration_minutes: int = MIN_SLOT_DURATION_MINUTES
    default_slot: Slot = DEFAULT_SLOT


@dataclass(frozen=True)
class DurationRules:
    """Bounds for the reservation duration field, in minutes."""
    min_minutes: int = MIN_DURATION_MINUTES
    max_minutes: int = MAX_DURATION_MINUTES


def empty_week() -> ReservationWeek:
    """Build a week with no slots on any day."""
    return {day.value: [] for day in WEEKDAYS}


@dataclass(frozen=True)
class PolicyResult:
    """
    Outcome of a single policy check.

    ``error`` is None when the check passed.
    """
    ok: bool
    error: ErrorKey | None = None

    @classmethod
    def passed(cls) -> "PolicyResult":
        return cls(ok=True)

    @classmethod
    def failed(cls, error: ErrorKey) -> "PolicyResult":
        return cls(ok=False, error=error)


@dataclass(frozen=True)
class SlotIssue:
    """An error key attributed to a slot index (None for day-level errors)."""
    error: ErrorKey
    index: int | None = None


@dataclass
class DayVerdict:
    """Validation result for one day's slot list."""
    ok: bool
    errors: List[ErrorKey] = field(default_factory=list)
    issues: List[SlotIssue] = field(default_factory=list)

    @classmethod
    def from_issues(cls, issues: List[SlotIssue]) -> "DayVerdict":
        return cls(
            ok=not issues,
            errors=[issue.error for issue in issues],
            issues=list(issues),
        )


@dataclass
class WeekVerdict:
    """
    Validation result for a full reservation week.

    ``per_day`` only contains days that have at least one error; valid days
    are omitted.
    """
    ok: bool
    per_day: Dict[Weekday, List[ErrorKey]] = field(default_factory=dict)

    def errors_for(self, day: Weekday | str) -> List[ErrorKey]:
        """Return the error keys for a day, empty when the day is valid."""
        return list(self.per_day.get(Weekday(day), []))

    def failing_days(self) -> List[Weekday]:
        """Days with errors, in week order."""
        return [day for day in WEEKDAYS if day in self.per_day]
