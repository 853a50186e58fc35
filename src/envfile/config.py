"""
Settings file for the ``envfile`` command line tool.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

OUTPUT_FORMATS = ("env", "yaml", "json")


class ConfigError(RuntimeError):
    """Raised when the user provided configuration is invalid."""


@dataclass
class CliConfig:
    """Defaults applied when the matching command line option is omitted."""

    path: str = ".env"
    format: str = "env"


def _optional_str(raw: Dict[str, Any], key: str, default: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Configuration key '{key}' must be a non-empty string")
    return value


def load_config(path: str | Path) -> CliConfig:
    """Load CliConfig from a YAML file."""

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in configuration file: {path}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration file must contain a mapping: {path}")

    output_format = _optional_str(raw, "format", "env")
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(f"Unsupported output format: {output_format}")

    return CliConfig(path=_optional_str(raw, "path", ".env"), format=output_format)


__all__ = ["CliConfig", "ConfigError", "OUTPUT_FORMATS", "load_config"]
