"""Persistent settings for file operations."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fileops.filesystem import check_text_encoding

logger = logging.getLogger(__name__)

# Default configuration location
CONFIG_DIR = Path.home() / ".fileops"

# CLI spellings of line terminators
NEWLINE_NAMES = {"lf": "\n", "crlf": "\r\n"}

# CLI key -> Settings field
CONFIG_KEYS = {
    "encoding": "encoding",
    "buffer-size": "buffer_size",
    "newline": "newline",
    "create-parents": "create_parents",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings(BaseModel):
    """Settings applied to every filesystem operation."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    version: str = "1.0"
    encoding: str = "utf-8"
    buffer_size: int = Field(default=8192, gt=0, alias="bufferSize")
    newline: str = "\n"
    create_parents: bool = Field(default=False, alias="createParents")

    @field_validator("encoding")
    @classmethod
    def _text_encoding(cls, value: str) -> str:
        return check_text_encoding(value)

    @field_validator("newline")
    @classmethod
    def _supported_newline(cls, value: str) -> str:
        if value not in NEWLINE_NAMES.values():
            raise ValueError("newline must be LF or CRLF")
        return value

    @property
    def newline_name(self) -> str:
        """CLI spelling of the configured line terminator."""
        return next(name for name, value in NEWLINE_NAMES.items() if value == self.newline)


def _coerce(key: str, value: str) -> Any:
    """Convert a CLI string value to the type stored for a key."""
    if key == "newline":
        lowered = value.lower()
        if lowered not in NEWLINE_NAMES:
            raise ValueError(f"newline must be one of: {', '.join(NEWLINE_NAMES)}")
        return NEWLINE_NAMES[lowered]
    if key == "create-parents":
        lowered = value.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"Invalid boolean value: {value}")
    return value


class ConfigManager:
    """Loads and saves settings."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Directory for the config file. Defaults to ~/.fileops.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.config_dir = config_dir or CONFIG_DIR
        self.config_file = self.config_dir / "config.json"

    @classmethod
    def create(cls, config_dir: Path) -> ConfigManager:
        """Create a config manager with a custom directory."""
        return cls(config_dir=config_dir)

    @classmethod
    def create_default(cls) -> ConfigManager:
        """Create a config manager using ~/.fileops."""
        return cls()

    def ensure_config_dir(self) -> None:
        """Create config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def load(self) -> Settings:
        """Load settings from disk.

        Returns:
            Stored settings, or defaults when no config file exists.

        Raises:
            ValueError: If the config file is not valid JSON or fails validation.
        """
        if not self.config_file.exists():
            return Settings()

        try:
            data = json.loads(self.config_file.read_text(encoding="utf-8"))
            return Settings.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise ValueError(f"Invalid config file {self.config_file}: {e}") from e

    def save(self, settings: Settings) -> None:
        """Save settings to disk."""
        self.ensure_config_dir()
        data = settings.model_dump(by_alias=True)
        self.config_file.write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.debug("Saved settings to %s", self.config_file)

    def set(self, key: str, value: str) -> Settings:
        """Update a single setting by its CLI key and persist it.

        Args:
            key: One of the keys in CONFIG_KEYS.
            value: Value as typed on the command line.

        Returns:
            The updated settings.

        Raises:
            ValueError: If the key is unknown or the value is invalid.
        """
        if key not in CONFIG_KEYS:
            raise ValueError(f"Unknown configuration key: {key}")

        settings = self.load()
        try:
            setattr(settings, CONFIG_KEYS[key], _coerce(key, value))
        except ValidationError as e:
            raise ValueError(f"Invalid value for {key}: {value}") from e
        self.save(settings)
        return settings
