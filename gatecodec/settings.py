"""Gate codec configuration settings.

Loads settings from:
1. An optional YAML file
2. Environment variables (``GATECODEC_*``, ``.env``)
3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CodecSettings(BaseSettings):
    """Central configuration for the codec and its CLI."""

    model_config = SettingsConfigDict(
        env_prefix="GATECODEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Logging ---
    log_level: str = Field(default="WARNING", description="Logging level")
    log_file: Optional[Path] = Field(default=None, description="Log file path (optional)")

    # --- Codec limits ---
    max_input_length: int = Field(
        default=4096, ge=64, description="Longest canonical string accepted"
    )

    # --- Output ---
    json_indent: Optional[int] = Field(default=2, ge=0, description="Indent for JSON output")

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "CodecSettings":
        """Load settings from a YAML file; missing files give defaults."""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            return cls()

        with open(yaml_path) as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)


_settings: Optional[CodecSettings] = None


def get_settings() -> CodecSettings:
    """Get or create the process settings instance"""
    global _settings
    if _settings is None:
        _settings = CodecSettings()
    return _settings


def reload_settings(yaml_path: Optional[str | Path] = None) -> CodecSettings:
    """Reload settings, optionally from a YAML file"""
    global _settings
    _settings = CodecSettings.from_yaml(yaml_path) if yaml_path else CodecSettings()
    return _settings
