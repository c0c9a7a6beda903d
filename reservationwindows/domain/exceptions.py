"""
Exception hierarchy for the reservation windows application.

Slot validation never raises; these cover configuration and file handling
around the engine.
"""


class ReservationWindowsError(Exception):
    """Base class for all application-level errors."""


class ConfigurationError(ReservationWindowsError, ValueError):
    """Raised when the application configuration cannot be loaded."""


class ReservationFileError(ReservationWindowsError, ValueError):
    """Raised when a reservation week file is unreadable or malformed."""
