"""
Boundary policy for a single slot.

A slot must lie within one day: 00:00 is a valid start, 23:59 a valid end,
and anything with end <= start is treated as an overnight range, which is
not supported.
"""

from typing import Sequence

from .error_keys import ErrorKey
from .models import MIN_SLOT_DURATION_MINUTES, PolicyResult, slot_bounds
from .time_codec import time_to_minutes


def validate_boundaries(
    slot: Sequence[str],
    min_duration: int = MIN_SLOT_DURATION_MINUTES
) -> PolicyResult:
    """
    Check format, overnight and minimum duration for a slot.

    Checks run in that order and the first failure wins:
    1. either bound is not "HH:mm" -> format
    2. end <= start -> overnightNotSupported
    3. end - start < min_duration -> order
    """
    start, end = slot_bounds(slot)
    start_minutes = time_to_minutes(start)
    end_minutes = time_to_minutes(end)

    if start_minutes is None or end_minutes is None:
        return PolicyResult.failed(ErrorKey.FORMAT)

    if end_minutes <= start_minutes:
        return PolicyResult.failed(ErrorKey.OVERNIGHT_NOT_SUPPORTED)

    # Duration violations share the ordering key
    if end_minutes - start_minutes < min_duration:
        return PolicyResult.failed(ErrorKey.ORDER)

    return PolicyResult.passed()


def is_overnight_range(slot: Sequence[str]) -> bool:
    """Check if a slot wraps past midnight (e.g. 22:00-02:00). False for malformed slots."""
    start, end = slot_bounds(slot)
    start_minutes = time_to_minutes(start)
    end_minutes = time_to_minutes(end)

    if start_minutes is None or end_minutes is None:
        return False

    return end_minutes <= start_minutes


def is_valid_range(slot: Sequence[str]) -> PolicyResult:
    """Check format and strict start < end ordering, without the overnight distinction."""
    start, end = slot_bounds(slot)
    start_minutes = time_to_minutes(start)
    end_minutes = time_to_minutes(end)

    if start_minutes is None or end_minutes is None:
        return PolicyResult.failed(ErrorKey.FORMAT)

    if start_minutes >= end_minutes:
        return PolicyResult.failed(ErrorKey.ORDER)

    return PolicyResult.passed()
