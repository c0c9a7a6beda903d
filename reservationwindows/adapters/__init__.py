"""
Adapters layer - Reservation week files on disk.
"""

from .week_file import dump_week, load_week, parse_week, save_week

__all__ = ["dump_week", "load_week", "parse_week", "save_week"]
