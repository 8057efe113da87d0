"""
Game configuration.

Settings are read from a JSON file into a pydantic model. Every field has a
default, so a missing file yields a playable configuration.
"""

import json
import os
from pathlib import Path
from typing import Any

from catchery import log_warning
from pydantic import BaseModel, Field, ValidationError, field_validator

# Environment variable overriding the configured log level.
LOG_LEVEL_ENV = "DUNGEON_LOG_LEVEL"


class GameConfig(BaseModel):
    """Settings for a game session and its command-line shell."""

    level_dir: Path = Field(
        default=Path("data/levels"),
        description="Directory containing the level files.",
    )
    level_template: str = Field(
        default="level{number}.txt",
        description="File name of a level, '{number}' is replaced by the level number.",
    )
    first_level: int = Field(
        default=1,
        ge=1,
        description="Number of the level the session starts from.",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name (DEBUG, INFO, WARNING, ...).",
    )
    show_legend: bool = Field(
        default=True,
        description="Whether the renderer prints the tile legend under the map.",
    )

    @field_validator("level_template")
    @classmethod
    def _template_has_number(cls, value: str) -> str:
        if "{number}" not in value:
            raise ValueError("level_template must contain '{number}'")
        return value

    def level_path(self, number: int) -> Path:
        """
        Returns the path of the level with the given number.

        Args:
            number (int): The level number.

        Returns:
            Path: The path of the level file.

        """
        return self.level_dir / self.level_template.format(number=number)


def config_from_dict(data: dict[str, Any], base_dir: Path | None = None) -> GameConfig:
    """
    Creates a GameConfig from a dictionary, resolving a relative level
    directory against base_dir.

    Args:
        data (dict[str, Any]): The raw settings.
        base_dir (Path | None): Directory relative paths are resolved against.

    Returns:
        GameConfig: The validated configuration.

    """
    config = GameConfig(**data)
    if base_dir is not None and not config.level_dir.is_absolute():
        config.level_dir = base_dir / config.level_dir
    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        config.log_level = env_level
    return config


def load_config(file_path: Path | None) -> GameConfig:
    """
    Loads the game configuration from a JSON file.

    Args:
        file_path (Path | None): The path of the JSON file, None for defaults.

    Returns:
        GameConfig: The loaded configuration, or the defaults if the file
        does not exist.

    Raises:
        ValueError: If the file exists but is not a valid configuration.

    """
    if file_path is None:
        return config_from_dict({})
    if not file_path.exists():
        log_warning(
            f"Configuration file {file_path} not found, using defaults",
            {"file_path": str(file_path), "context": "config_loading"},
        )
        return config_from_dict({})
    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected object, got {type(data).__name__}")
        return config_from_dict(data, base_dir=file_path.parent)
    except (json.JSONDecodeError, ValidationError, ValueError) as e:
        raise ValueError(f"File {file_path} raised an error: {e}") from e
