"""
Tests for reading and writing reservation week files.
"""

import pytest
import yaml

from reservationwindows.adapters.week_file import dump_week, load_week, parse_week, save_week
from reservationwindows.domain.exceptions import ReservationFileError
from reservationwindows.domain.models import WEEKDAYS, empty_week


class TestParseWeek:
    """Tests for parse_week."""

    def test_parse_fills_missing_days(self):
        week = parse_week({"saturday": [["09:00", "12:00"]]})

        assert week["saturday"] == [("09:00", "12:00")]
        assert week["friday"] == []
        assert len(week) == 7

    def test_day_names_are_case_insensitive(self):
        week = parse_week({"Monday": [["09:00", "12:00"]]})

        assert week["monday"] == [("09:00", "12:00")]

    def test_empty_data(self):
        assert parse_week(None) == empty_week()

    def test_unknown_day(self):
        with pytest.raises(ReservationFileError, match="Unknown weekday"):
            parse_week({"holiday": []})

    def test_bad_slot_shape(self):
        with pytest.raises(ReservationFileError, match=r"saturday\[0\]"):
            parse_week({"saturday": [["09:00"]]})

    def test_day_must_hold_list(self):
        with pytest.raises(ReservationFileError):
            parse_week({"saturday": {"from": "09:00"}})

    def test_root_must_be_mapping(self):
        with pytest.raises(ReservationFileError):
            parse_week([["09:00", "12:00"]])


class TestLoadWeek:
    """Tests for loading files."""

    def test_unquoted_times_stay_text(self, tmp_path):
        """Test that 12:00 is not read as a base-60 integer."""
        path = tmp_path / "week.yaml"
        path.write_text("sunday:\n  - [12:00, 15:30]\nmonday:\n", encoding="utf-8")

        week = load_week(path)

        assert week["sunday"] == [("12:00", "15:30")]
        assert week["monday"] == []

    def test_load_json(self, tmp_path):
        path = tmp_path / "week.json"
        path.write_text('{"friday": [["18:00", "23:00"]]}', encoding="utf-8")

        assert load_week(path)["friday"] == [("18:00", "23:00")]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_week(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "week.yaml"
        path.write_text("saturday: [unclosed\n", encoding="utf-8")

        with pytest.raises(ReservationFileError, match="Invalid YAML"):
            load_week(path)


class TestDumpWeek:
    """Tests for writing files."""

    def test_dump_orders_days(self):
        week = empty_week()
        week["friday"] = [("12:00", "13:00")]

        text = dump_week(week)
        data = yaml.safe_load(text)

        assert list(data) == [day.value for day in WEEKDAYS]
        assert data["friday"] == [["12:00", "13:00"]]

    def test_save_then_load(self, tmp_path):
        week = empty_week()
        week["saturday"] = [("09:00", "12:00"), ("12:00", "15:00")]
        path = tmp_path / "out.yaml"

        save_week(week, path)

        assert load_week(path) == week
