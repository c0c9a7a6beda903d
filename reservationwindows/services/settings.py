"""
Application service for editing a branch's reservation settings.

The service sits between an editing surface (a form, the CLI) and the pure
domain rules. Translation and confirmation are plain callables handed in by
the caller, so the domain never reaches for global i18n or UI state and the
service can be exercised in tests with simple stubs.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Protocol

from ..domain.duration import is_valid_duration, sanitize_duration
from ..domain.editing import add_slot_to_day, apply_to_all_days, can_add_slot_to_day, copy_week
from ..domain.models import DurationRules, ReservationWeek, SlotRules, WeekInput, WeekVerdict, Weekday
from ..domain.normalization import normalize_slots
from ..domain.validator import ReservationValidator

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]

APPLY_TO_ALL_PROMPT_KEY = "settings.slots.confirmApplyToAll"


class TranslateFunction(Protocol):
    """Protocol for the i18n lookup supplied by the caller."""

    def __call__(self, key: str) -> str:
        """Return display text for an i18n key."""


class ReservationSettingsService:
    """
    Orchestrates validation and edits of a reservation week.

    Every method returns a new week; the week passed in is never modified.
    """

    def __init__(
        self,
        translate: TranslateFunction,
        confirm: ConfirmCallback | None = None,
        rules: SlotRules | None = None,
        duration_rules: DurationRules | None = None,
    ) -> None:
        self._translate = translate
        self._confirm = confirm
        self._validator = ReservationValidator(rules)
        self._duration_rules = duration_rules or DurationRules()

    @property
    def slot_rules(self) -> SlotRules:
        return self._validator.rules

    @property
    def duration_rules(self) -> DurationRules:
        return self._duration_rules

    def validate(self, week: WeekInput) -> WeekVerdict:
        """Validate the full week against the configured slot rules."""
        verdict = self._validator.validate_week(week)
        for day in verdict.failing_days():
            logger.debug(
                "Reservation slots invalid on %s: %s",
                day.value,
                ", ".join(key.value for key in verdict.per_day[day]),
            )
        return verdict

    def is_valid(self, week: WeekInput) -> bool:
        return self.validate(week).ok

    def error_messages(self, verdict: WeekVerdict) -> Dict[Weekday, List[str]]:
        """Translate each failing day's error keys into display text."""
        return {
            day: [self._translate(key.value) for key in verdict.per_day[day]]
            for day in verdict.failing_days()
        }

    def normalize_week(self, week: WeekInput) -> ReservationWeek:
        """Normalize every day of the week."""
        return {day: normalize_slots(slots) for day, slots in copy_week(week).items()}

    def add_slot(self, week: WeekInput, day: Weekday | str) -> ReservationWeek:
        """
        Add the default slot to a day.

        A day already at the slot limit is left unchanged.
        """
        if not can_add_slot_to_day(week, day, max_slots=self.slot_rules.max_slots_per_day):
            logger.info("Slot limit reached on %s; not adding a slot", Weekday(day).value)
            return copy_week(week)
        return add_slot_to_day(week, day, self.slot_rules.default_slot)

    def apply_to_all_days(self, week: WeekInput, source_day: Weekday | str) -> ReservationWeek:
        """
        Copy one day's slots to every day of the week.

        With a confirm callback set, the copy only happens when it returns True.
        """
        if self._confirm is not None:
            prompt = self._translate(APPLY_TO_ALL_PROMPT_KEY)
            if not self._confirm(prompt):
                logger.info("Apply to all days from %s cancelled", Weekday(source_day).value)
                return copy_week(week)

        return apply_to_all_days(week, source_day)

    def sanitize_duration(self, value) -> int | None:
        """Coerce a reservation duration field value within the configured bounds."""
        return sanitize_duration(
            value,
            min_minutes=self._duration_rules.min_minutes,
            max_minutes=self._duration_rules.max_minutes,
        )

    def is_valid_duration(self, value) -> bool:
        return is_valid_duration(
            value,
            min_minutes=self._duration_rules.min_minutes,
            max_minutes=self._duration_rules.max_minutes,
        )
