"""
Canonical form of a day's slot list.

``normalize_slots`` is safe to re-apply on every edit: it is idempotent,
never mutates its input, and returns fresh slot tuples so the caller can
modify the result freely.

Slots are ordered by start minute, the same ordering ``compare_times`` gives.
Starts that ``compare_times`` cannot parse are placed after every parseable
start instead of comparing equal to them.
"""

from typing import List, Sequence, Tuple

from .models import Slot, clone_slot
from .time_codec import time_to_minutes


def _start_sort_key(slot: Slot) -> Tuple[bool, int]:
    # Unparseable starts keep their relative order after all valid ones
    start_minutes = time_to_minutes(slot[0])
    if start_minutes is None:
        return True, 0
    return False, start_minutes


def normalize_slots(slots: Sequence[Sequence[str]]) -> List[Slot]:
    """
    Clone, sort by start time and deduplicate a list of slots.

    Sorting is stable, so slots with equal starts keep their input order.
    Of two identical (start, end) pairs the first in sorted order is kept.
    """
    cloned = [clone_slot(slot) for slot in slots]
    ordered = sorted(cloned, key=_start_sort_key)

    normalized: List[Slot] = []
    seen = set()
    for slot in ordered:
        if slot in seen:
            continue
        seen.add(slot)
        normalized.append(slot)

    return normalized
