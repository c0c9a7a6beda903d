"""
Service layer helpers that wire collaborators into the domain rules.
"""

from .settings import ConfirmCallback, ReservationSettingsService, TranslateFunction

__all__ = ["ConfirmCallback", "ReservationSettingsService", "TranslateFunction"]
