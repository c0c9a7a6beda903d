"""
Tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from reservationwindows.config import AppConfig, SlotsConfig
from reservationwindows.domain.exceptions import ConfigurationError
from reservationwindows.domain.models import DurationRules, SlotRules


class TestSlotsConfig:
    """Tests for slot rule settings."""

    def test_defaults(self):
        config = AppConfig()

        assert config.get_slot_rules() == SlotRules()
        assert config.duration.min_minutes == 5
        assert config.duration.max_minutes == 1440

    def test_to_rules(self):
        slots = SlotsConfig(max_per_day=5, min_duration_minutes=15, default_start="10:00", default_end="14:00")

        rules = slots.to_rules()

        assert rules.max_slots_per_day == 5
        assert rules.min_duration_minutes == 15
        assert rules.default_slot == ("10:00", "14:00")

    def test_invalid_default_time(self):
        with pytest.raises(ValidationError, match="HH:mm"):
            SlotsConfig(default_start="9:00")

    def test_default_slot_order(self):
        with pytest.raises(ValidationError, match="default_end must be later"):
            SlotsConfig(default_start="18:00", default_end="09:00")

    def test_max_per_day_positive(self):
        with pytest.raises(ValidationError):
            SlotsConfig(max_per_day=0)

    def test_duration_bounds_order(self):
        with pytest.raises(ValidationError):
            AppConfig(duration={"min_minutes": 60, "max_minutes": 30})

    def test_duration_rules(self):
        config = AppConfig(duration={"min_minutes": 15, "max_minutes": 240})

        assert config.get_duration_rules() == DurationRules(min_minutes=15, max_minutes=240)
        assert AppConfig().get_duration_rules() == DurationRules()


class TestLoadFromYaml:
    """Tests for AppConfig.load_from_yaml."""

    def test_load(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "slots:\n"
            "  max_per_day: 4\n"
            "  default_start: '08:00'\n"
            "  default_end: '12:00'\n"
            "messages:\n"
            "  settings.slots.errors.max: Too many\n",
            encoding="utf-8",
        )

        config = AppConfig.load_from_yaml(path)

        assert config.slots.max_per_day == 4
        assert config.messages["settings.slots.errors.max"] == "Too many"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("slots: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            AppConfig.load_from_yaml(path)

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="mapping"):
            AppConfig.load_from_yaml(path)

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")

        assert AppConfig.load_from_yaml(path) == AppConfig()

    def test_load_or_default_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            "reservationwindows.config.get_default_config_path",
            lambda: tmp_path / "config.yaml",
        )

        assert AppConfig.load_or_default() == AppConfig()
