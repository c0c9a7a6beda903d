"""
Per-day slot count limits.
"""

from typing import Sequence

from .error_keys import ErrorKey
from .models import MAX_SLOTS_PER_DAY, PolicyResult


def can_add_within_limit(
    existing: Sequence[object],
    max_slots: int = MAX_SLOTS_PER_DAY
) -> PolicyResult:
    """Reject a further slot once the day already holds ``max_slots``."""
    if len(existing) >= max_slots:
        return PolicyResult.failed(ErrorKey.MAX)
    return PolicyResult.passed()


def is_at_limit(slots: Sequence[object], max_slots: int = MAX_SLOTS_PER_DAY) -> bool:
    return len(slots) >= max_slots


def remaining_capacity(slots: Sequence[object], max_slots: int = MAX_SLOTS_PER_DAY) -> int:
    """Number of slots that can still be added; never negative."""
    return max(0, max_slots - len(slots))
