"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import Dict

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.duration import MAX_DURATION_MINUTES, MIN_DURATION_MINUTES
from .domain.exceptions import ConfigurationError
from .domain.models import (
    DEFAULT_SLOT_END,
    DEFAULT_SLOT_START,
    MAX_SLOTS_PER_DAY,
    MIN_SLOT_DURATION_MINUTES,
    DurationRules,
    SlotRules,
)
from .domain.time_codec import MAX_MINUTE_OF_DAY, MINUTES_PER_DAY, time_to_minutes


class SlotsConfig(BaseModel):
    """Per-day slot rules."""
    max_per_day: int = MAX_SLOTS_PER_DAY
    min_duration_minutes: int = MIN_SLOT_DURATION_MINUTES
    default_start: str = DEFAULT_SLOT_START
    default_end: str = DEFAULT_SLOT_END

    @field_validator("max_per_day")
    @classmethod
    def validate_max_per_day(cls, value: int) -> int:
        """Ensure at least one slot per day is allowed."""
        if value < 1:
            raise ValueError("max_per_day must be at least 1")
        return value

    @field_validator("min_duration_minutes")
    @classmethod
    def validate_min_duration(cls, value: int) -> int:
        """A slot has to fit inside a single day."""
        if not 1 <= value <= MAX_MINUTE_OF_DAY:
            raise ValueError(
                f"min_duration_minutes must be between 1 and {MAX_MINUTE_OF_DAY}, got {value}"
            )
        return value

    @field_validator("default_start", "default_end")
    @classmethod
    def validate_time(cls, value: str) -> str:
        """Validate HH:mm format."""
        if time_to_minutes(value) is None:
            raise ValueError(f"Time must use the HH:mm format (00:00-23:59), got '{value}'")
        return value

    @model_validator(mode="after")
    def validate_default_order(self) -> "SlotsConfig":
        """Ensure the default slot opens before it closes."""
        if time_to_minutes(self.default_end) <= time_to_minutes(self.default_start):
            raise ValueError("default_end must be later than default_start")
        return self

    def to_rules(self) -> SlotRules:
        return SlotRules(
            max_slots_per_day=self.max_per_day,
            min_duration_minutes=self.min_duration_minutes,
            default_slot=(self.default_start, self.default_end),
        )


class DurationConfig(BaseModel):
    """Bounds for the reservation duration field."""
    min_minutes: int = MIN_DURATION_MINUTES
    max_minutes: int = MAX_DURATION_MINUTES

    @model_validator(mode="after")
    def validate_bounds(self) -> "DurationConfig":
        if self.min_minutes < 1:
            raise ValueError("min_minutes must be at least 1")
        if self.max_minutes > MINUTES_PER_DAY:
            raise ValueError(f"max_minutes must not exceed {MINUTES_PER_DAY}")
        if self.max_minutes < self.min_minutes:
            raise ValueError("max_minutes must not be below min_minutes")
        return self

    def to_rules(self) -> DurationRules:
        return DurationRules(min_minutes=self.min_minutes, max_minutes=self.max_minutes)


class AppConfig(BaseModel):
    """Application configuration."""
    slots: SlotsConfig = Field(default_factory=SlotsConfig)
    duration: DurationConfig = Field(default_factory=DurationConfig)
    messages: Dict[str, str] = Field(default_factory=dict)  # i18n key -> text overrides

    def get_slot_rules(self) -> SlotRules:
        return self.slots.to_rules()

    def get_duration_rules(self) -> DurationRules:
        return self.duration.to_rules()

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If the YAML is not a mapping or cannot be parsed
            ValueError: If config values are invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a mapping at the root level.")

        return cls(**data)

    @classmethod
    def load_or_default(cls, config_path: Path | None = None) -> "AppConfig":
        """
        Load an explicit config file, or the default one when it exists.

        An explicit path must exist; a missing default config means built-in defaults.
        """
        if config_path is not None:
            return cls.load_from_yaml(config_path)

        default_path = get_default_config_path()
        if not default_path.exists():
            return cls()
        return cls.load_from_yaml(default_path)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
