"""
Non-mutating edit operations on a reservation week.

Every function returns a new week mapping; the input week and its slot lists
are never modified. Days missing from the input are treated as empty.
"""

from typing import List, Sequence

from .boundaries import is_valid_range
from .error_keys import ErrorKey
from .limits import can_add_within_limit
from .models import (
    DEFAULT_SLOT,
    MAX_SLOTS_PER_DAY,
    WEEKDAYS,
    PolicyResult,
    ReservationWeek,
    Slot,
    WeekInput,
    Weekday,
    clone_slot,
)
from .normalization import normalize_slots
from .overlap import is_strict_overlap

SLOT_FIELDS = ("from", "to")


def _day_key(day: Weekday | str) -> str:
    return Weekday(day).value


def _clone_slots(slots: Sequence[Sequence[str]]) -> List[Slot]:
    return [clone_slot(slot) for slot in slots]


def copy_week(week: WeekInput) -> ReservationWeek:
    """Deep copy a week, filling in missing days with empty lists."""
    return {
        day.value: _clone_slots(week.get(day.value) or [])
        for day in WEEKDAYS
    }


def get_day_slots(week: WeekInput, day: Weekday | str) -> List[Slot]:
    """Normalized slots for a single day."""
    return normalize_slots(week.get(_day_key(day)) or [])


def can_add_slot_to_day(
    week: WeekInput,
    day: Weekday | str,
    max_slots: int = MAX_SLOTS_PER_DAY
) -> bool:
    return can_add_within_limit(week.get(_day_key(day)) or [], max_slots=max_slots).ok


def can_add_slot(
    existing: Sequence[Sequence[str]],
    candidate: Sequence[str],
    max_slots: int = MAX_SLOTS_PER_DAY
) -> PolicyResult:
    """
    Check whether a candidate slot may join a day's existing slots.

    Order of checks: candidate range (format, start < end), day limit,
    then overlap with each existing slot.
    """
    range_check = is_valid_range(candidate)
    if not range_check.ok:
        return range_check

    limit_check = can_add_within_limit(existing, max_slots=max_slots)
    if not limit_check.ok:
        return limit_check

    for slot in existing:
        if is_strict_overlap(candidate, slot):
            return PolicyResult.failed(ErrorKey.OVERLAP)

    return PolicyResult.passed()


def add_slot_to_day(
    week: WeekInput,
    day: Weekday | str,
    slot: Sequence[str] = DEFAULT_SLOT
) -> ReservationWeek:
    """Append a slot (09:00-17:00 by default) to a day."""
    updated = copy_week(week)
    updated[_day_key(day)].append(clone_slot(slot))
    return updated


def remove_slot_from_day(
    week: WeekInput,
    day: Weekday | str,
    index: int
) -> ReservationWeek:
    """Remove the slot at ``index``; an unknown index leaves the day as it was."""
    updated = copy_week(week)
    key = _day_key(day)
    updated[key] = [
        slot for position, slot in enumerate(updated[key])
        if position != index
    ]
    return updated


def update_slot_field(
    week: WeekInput,
    day: Weekday | str,
    index: int,
    field: str,
    value: str
) -> ReservationWeek:
    """
    Replace the start ("from") or end ("to") of one slot.

    Raises:
        ValueError: If field is not "from" or "to"
    """
    if field not in SLOT_FIELDS:
        raise ValueError(f"field must be one of {SLOT_FIELDS}, got '{field}'")

    updated = copy_week(week)
    slots = updated[_day_key(day)]
    if not 0 <= index < len(slots):
        return updated

    start, end = slots[index]
    slots[index] = (value, end) if field == "from" else (start, value)
    return updated


def apply_to_all_days(week: WeekInput, source_day: Weekday | str) -> ReservationWeek:
    """Give every day its own copy of the source day's slots."""
    template = week.get(_day_key(source_day)) or []
    return {day.value: _clone_slots(template) for day in WEEKDAYS}


def copy_saturday_to_all(week: WeekInput) -> ReservationWeek:
    return apply_to_all_days(week, Weekday.SATURDAY)
