"""
screensync.config - YAML config loading and validation.

Handles locating and loading screensync.yaml, applying defaults, and
validating all parameters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from screensync.exceptions import ConfigError

CONFIG_FILENAME = "screensync.yaml"


class ScreenSyncConfig(BaseModel):
    """Resolved configuration for saving and previewing screenplays."""

    downloads_dir: Path = Path("downloads")
    file_extension: str = ".fdx"
    words_per_page: int = Field(default=250, gt=0)

    config_path: Path | None = None

    @field_validator("file_extension")
    @classmethod
    def validate_file_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("file_extension must start with '.' and name an extension")
        return v

    def resolve_downloads_dir(self) -> Path:
        """Downloads directory, relative paths anchored at the config file."""
        if self.downloads_dir.is_absolute() or self.config_path is None:
            return self.downloads_dir
        return self.config_path.parent / self.downloads_dir


def find_config(start: Path | None = None) -> Path | None:
    """Find screensync.yaml in the start directory or any parent."""
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(config_file: Path) -> ScreenSyncConfig:
    """Load and validate configuration from a YAML file."""
    if not config_file.exists():
        raise FileNotFoundError(f"No {CONFIG_FILENAME} found at {config_file}")

    with open(config_file) as f:
        raw_config = yaml.safe_load(f) or {}

    if not isinstance(raw_config, dict):
        raise ConfigError(f"{config_file} must contain a mapping")

    raw_config["config_path"] = config_file
    try:
        return ScreenSyncConfig(**raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e


def create_default_config() -> dict[str, Any]:
    """Create a default config mapping suitable for writing to disk."""
    defaults = ScreenSyncConfig()
    return {
        "downloads_dir": str(defaults.downloads_dir),
        "file_extension": defaults.file_extension,
        "words_per_page": defaults.words_per_page,
    }


def write_config(config: dict[str, Any], path: Path) -> None:
    """Write configuration to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
