"""
reservationwindows - Validation and normalization of branch reservation slots.
"""

__version__ = "0.1.0"
