"""
filejson.config - Option models and YAML config loading.

Every operation takes an optional options object; omitting it means the
defaults documented on the models below. A FileJSONConfig bundles all of them
and can be loaded from a YAML file.
"""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from filejson.exceptions import ConfigError


class ReadingOptions(BaseModel):
    """Parser leniency for JSON reads."""

    allow_fragments: bool = True
    mapped_if_safe: bool = True


class EncoderOptions(BaseModel):
    """Configuration for the standard JSON encoder."""

    pretty_printed: bool = False
    sorted_keys: bool = False
    ensure_ascii: bool = False
    allow_nan: bool = False
    date_encoding: Literal["iso8601", "seconds_since_1970", "milliseconds_since_1970"] = "iso8601"
    key_encoding: Literal["use_default_keys", "convert_to_snake_case"] = "use_default_keys"

    @property
    def indent(self) -> int | None:
        return 2 if self.pretty_printed else None

    @property
    def separators(self) -> tuple[str, str]:
        return (",", ": ") if self.pretty_printed else (",", ":")


class FileAttributes(BaseModel):
    """Metadata applied to a file right after it is created."""

    permissions: int | None = Field(default=None, ge=0, le=0o7777)
    owner_id: int | None = Field(default=None, ge=0)
    group_id: int | None = Field(default=None, ge=0)
    modification_date: datetime | None = None

    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())


class FileJSONConfig(BaseModel):
    """Resolved defaults for a FileJSONHelper."""

    reading: ReadingOptions = Field(default_factory=ReadingOptions)
    encoder: EncoderOptions = Field(default_factory=EncoderOptions)

    resource_root: Path | None = None
    temp_root: Path | None = None
    temp_prefix: str = "filejson-"

    @field_validator("temp_prefix")
    @classmethod
    def validate_temp_prefix(cls, v: str) -> str:
        if "/" in v or "\\" in v:
            raise ValueError("temp_prefix must not contain path separators")
        return v


def load_config(path: Path) -> FileJSONConfig:
    """Load and validate a FileJSONConfig from a YAML file.

    Relative ``resource_root`` and ``temp_root`` entries are resolved against
    the directory holding the config file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the file is not valid YAML or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No config file found at {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(path, f"invalid YAML: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigError(path, "top-level value must be a mapping")

    for key in ("resource_root", "temp_root"):
        value = raw_config.get(key)
        if isinstance(value, (str, os.PathLike)) and not Path(value).is_absolute():
            raw_config[key] = path.parent / value

    try:
        return FileJSONConfig(**raw_config)
    except ValidationError as e:
        raise ConfigError(path, str(e)) from e


def config_to_dict(config: FileJSONConfig) -> dict[str, Any]:
    """Dump a config to plain YAML-friendly values, dropping unset roots."""
    data = config.model_dump(mode="json")
    for key in ("resource_root", "temp_root"):
        if data.get(key) is None:
            data.pop(key, None)
    return data


def write_config(config: FileJSONConfig, path: Path) -> None:
    """Write configuration to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config_to_dict(config), f, default_flow_style=False, sort_keys=False)
