"""
Reading and writing reservation weeks as YAML (or JSON) files.

File layout, one key per weekday, each holding a list of [start, end] pairs:

    saturday:
      - ["09:00", "12:00"]
      - ["13:00", "17:00"]
    sunday: []

Shape problems raise ReservationFileError. Time values are passed through
untouched so the engine can report format errors per slot.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..domain.exceptions import ReservationFileError
from ..domain.models import WEEKDAYS, ReservationWeek, Slot, Weekday, empty_week

logger = logging.getLogger(__name__)


def _parse_slot(day: Weekday, position: int, raw: Any) -> Slot:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ReservationFileError(
            f"{day.value}[{position}] must be a [start, end] pair, got {raw!r}"
        )
    start, end = raw
    return str(start), str(end)


def parse_week(data: Any) -> ReservationWeek:
    """
    Convert decoded YAML/JSON data into a reservation week.

    Raises:
        ReservationFileError: If the data is not a weekday mapping of slot pairs
    """
    if data in (None, ""):
        return empty_week()

    if not isinstance(data, dict):
        raise ReservationFileError("Reservation file must contain a mapping of weekdays.")

    week = empty_week()
    for raw_day, raw_slots in data.items():
        try:
            day = Weekday.from_name(str(raw_day))
        except ValueError as exc:
            raise ReservationFileError(str(exc)) from exc

        if raw_slots in (None, ""):
            continue
        if not isinstance(raw_slots, list):
            raise ReservationFileError(f"{day.value} must hold a list of slots.")

        week[day.value] = [
            _parse_slot(day, position, raw)
            for position, raw in enumerate(raw_slots)
        ]

    return week


def load_week(path: Path) -> ReservationWeek:
    """
    Load a reservation week from a YAML or JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ReservationFileError: If the file cannot be parsed
    """
    if not path.exists():
        raise FileNotFoundError(f"Reservation file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            # BaseLoader keeps every scalar a string, so 12:00 is not read as sexagesimal 720
            data = yaml.load(f, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise ReservationFileError(f"Invalid YAML in {path}: {exc}") from exc

    week = parse_week(data)
    logger.debug(
        "Loaded reservation week from %s (%d slots)",
        path,
        sum(len(slots) for slots in week.values()),
    )
    return week


def dump_week(week: ReservationWeek) -> str:
    """Serialize a week to YAML with days in week order."""
    data: Dict[str, List[List[str]]] = {
        day.value: [list(slot) for slot in week.get(day.value) or []]
        for day in WEEKDAYS
    }
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=None)


def save_week(week: ReservationWeek, path: Path) -> None:
    """Write a week to a YAML file."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_week(week))
    logger.debug("Wrote reservation week to %s", path)
