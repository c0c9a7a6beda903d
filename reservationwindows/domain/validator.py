"""
Day and week validation of reservation slots.

This is the heart of the engine: it composes the boundary, overlap and limit
policies into a single verdict. Pure domain logic, no I/O.
"""

from typing import Dict, List, Sequence

from .boundaries import validate_boundaries
from .error_keys import ErrorKey
from .models import (
    MAX_SLOTS_PER_DAY,
    MIN_SLOT_DURATION_MINUTES,
    WEEKDAYS,
    DayVerdict,
    SlotIssue,
    SlotRules,
    WeekInput,
    WeekVerdict,
    Weekday,
)
from .overlap import is_strict_overlap


def _check_overlaps_after(index: int, slots: Sequence[Sequence[str]]) -> ErrorKey | None:
    """
    Compare slot ``index`` with the slots after it.

    Overlap is symmetric, so scanning only j > i covers every pair once.
    """
    slot = slots[index]
    for other in slots[index + 1:]:
        if is_strict_overlap(slot, other):
            return ErrorKey.OVERLAP
    return None


def _check_slot(
    index: int,
    slots: Sequence[Sequence[str]],
    min_duration: int
) -> ErrorKey | None:
    """Return the first error for one slot: format, overnight, order, then overlap."""
    boundary = validate_boundaries(slots[index], min_duration=min_duration)
    if not boundary.ok:
        return boundary.error
    return _check_overlaps_after(index, slots)


def validate_day_slots(
    slots: Sequence[Sequence[str]],
    max_slots: int = MAX_SLOTS_PER_DAY,
    min_duration: int = MIN_SLOT_DURATION_MINUTES
) -> DayVerdict:
    """
    Validate one day's slots.

    A day holding more than ``max_slots`` slots reports only the limit error;
    its slots are not checked individually. Otherwise every slot contributes
    at most one error, in input order.

    Args:
        slots: Slots for a single day, as ("HH:mm", "HH:mm") pairs
        max_slots: Maximum number of slots allowed on the day
        min_duration: Minimum slot length in minutes

    Returns:
        DayVerdict with ordered error keys and their slot indices
    """
    if len(slots) > max_slots:
        return DayVerdict.from_issues([SlotIssue(error=ErrorKey.MAX)])

    issues: List[SlotIssue] = []
    for index in range(len(slots)):
        error = _check_slot(index, slots, min_duration)
        if error is not None:
            issues.append(SlotIssue(error=error, index=index))

    return DayVerdict.from_issues(issues)


def validate_week(
    week: WeekInput,
    max_slots: int = MAX_SLOTS_PER_DAY,
    min_duration: int = MIN_SLOT_DURATION_MINUTES
) -> WeekVerdict:
    """
    Validate every weekday of a reservation week.

    Missing days count as empty and empty days are always valid. Only days
    with errors appear in ``per_day``.
    """
    per_day: Dict[Weekday, List[ErrorKey]] = {}

    for day in WEEKDAYS:
        slots = week.get(day.value) or []
        verdict = validate_day_slots(slots, max_slots=max_slots, min_duration=min_duration)
        if not verdict.ok:
            per_day[day] = verdict.errors

    return WeekVerdict(ok=not per_day, per_day=per_day)


class ReservationValidator:
    """
    Validates reservation slots against a configured set of slot rules.

    Thin object wrapper over ``validate_day_slots`` / ``validate_week`` so
    callers holding loaded configuration do not pass limits on every call.
    """

    def __init__(self, rules: SlotRules | None = None):
        self.rules = rules or SlotRules()

    def validate_day(self, slots: Sequence[Sequence[str]]) -> DayVerdict:
        return validate_day_slots(
            slots,
            max_slots=self.rules.max_slots_per_day,
            min_duration=self.rules.min_duration_minutes,
        )

    def validate_week(self, week: WeekInput) -> WeekVerdict:
        return validate_week(
            week,
            max_slots=self.rules.max_slots_per_day,
            min_duration=self.rules.min_duration_minutes,
        )

    def is_valid_week(self, week: WeekInput) -> bool:
        return self.validate_week(week).ok
