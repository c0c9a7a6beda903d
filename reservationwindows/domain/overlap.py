"""
Overlap policy for slots within the same day.

Touching slots (09:00-12:00 and 12:00-15:00) are back-to-back bookings and
do not overlap. Slots that fail to parse never overlap anything; their format
errors are reported by the boundary policy.
"""

from typing import List, Sequence, Tuple

from .error_keys import ErrorKey
from .models import PolicyResult, Slot, clone_slot, slot_bounds
from .time_codec import time_to_minutes


def _minutes_range(slot: Sequence[str]) -> Tuple[int, int] | None:
    start, end = slot_bounds(slot)
    start_minutes = time_to_minutes(start)
    end_minutes = time_to_minutes(end)
    if start_minutes is None or end_minutes is None:
        return None
    return start_minutes, end_minutes


def is_strict_overlap(a: Sequence[str], b: Sequence[str]) -> bool:
    """Check if two slots share more than a boundary minute."""
    range_a = _minutes_range(a)
    range_b = _minutes_range(b)
    if range_a is None or range_b is None:
        return False

    a_start, a_end = range_a
    b_start, b_end = range_b

    if a_end == b_start or b_end == a_start:
        return False

    return a_start < b_end and a_end > b_start


def can_add_without_overlap(
    existing: Sequence[Sequence[str]],
    candidate: Sequence[str]
) -> PolicyResult:
    """Check that a candidate slot does not overlap any existing slot."""
    for slot in existing:
        if is_strict_overlap(candidate, slot):
            return PolicyResult.failed(ErrorKey.OVERLAP)
    return PolicyResult.passed()


def find_overlapping(
    slots: Sequence[Sequence[str]],
    target: Sequence[str]
) -> List[Slot]:
    """Return every slot that strictly overlaps the target, in input order."""
    return [
        clone_slot(slot) for slot in slots
        if is_strict_overlap(slot, target)
    ]
