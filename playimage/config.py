"""
playimage.config - Conversion constants, YAML loading, validation.

The defaults are the fixed constants of the conversion. An optional YAML
file can override them; every value is validated before any stage runs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from playimage.exceptions import ConfigError

DEFAULT_INPUT = Path("data/waveform-original.bmp")
DEFAULT_OUTPUT = Path("playable-image.wav")


class ConversionConfig(BaseModel):
    """Resolved tunables for one image-to-WAV conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    threshold: float = Field(default=0.5, gt=0.0, le=1.0)
    filter_depth: int = Field(default=4, ge=1)
    stretch_rate: int = Field(default=9, ge=1)

    sample_rate: int = Field(default=48000, gt=0)
    channel_count: int = 1
    bytes_per_sample: int = 1

    @field_validator("channel_count")
    @classmethod
    def validate_channel_count(cls, v: int) -> int:
        if v != 1:
            raise ValueError("Only mono output is supported (channel_count must be 1)")
        return v

    @field_validator("bytes_per_sample")
    @classmethod
    def validate_bytes_per_sample(cls, v: int) -> int:
        if v != 1:
            raise ValueError("Only 8-bit output is supported (bytes_per_sample must be 1)")
        return v

    @property
    def byte_rate(self) -> int:
        return self.sample_rate * self.channel_count * self.bytes_per_sample

    @property
    def block_align(self) -> int:
        return self.channel_count * self.bytes_per_sample

    @property
    def bits_per_sample(self) -> int:
        return self.bytes_per_sample * 8


def load_config(path: Path | None = None) -> ConversionConfig:
    """Load and validate configuration, falling back to the defaults.

    Args:
        path: Optional YAML file with overrides

    Returns:
        Validated ConversionConfig

    Raises:
        ConfigError: If the file is missing, unparsable or holds invalid values
    """
    if path is None:
        return ConversionConfig()

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        return ConversionConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e


def write_config(config: ConversionConfig, path: Path) -> None:
    """Write configuration to a YAML file."""
    data: dict[str, Any] = config.model_dump()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
