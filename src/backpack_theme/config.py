"""
backpack-theme.toml configuration.

Example:

    [theme]
    source = "theme.yaml"
    default_mode = "dark"

    [export]
    output_dir = "static/css"

    [logging]
    level = "INFO"
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .tokens import ColorMode

logger = logging.getLogger(__name__)

CONFIG_FILE = "backpack-theme.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ThemeSection:
    """Where the theme comes from and which mode is used by default."""

    source: Path | None = None  # YAML theme; built-in site theme when unset
    default_mode: ColorMode = ColorMode.LIGHT


@dataclass
class ExportSection:
    output_dir: Path = Path(".")


@dataclass
class LoggingSection:
    level: str | None = None


@dataclass
class ThemeConfig:
    theme: ThemeSection = field(default_factory=ThemeSection)
    export: ExportSection = field(default_factory=ExportSection)
    logging: LoggingSection = field(default_factory=LoggingSection)


def _table(data: dict[str, Any], name: str, known: set[str]) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    for key in sorted(set(section) - known):
        logger.warning("Ignoring unknown key %r in [%s]", key, name)
    return section


def _path_value(section: dict[str, Any], name: str, key: str) -> str | None:
    value = section.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"[{name}].{key} must be a string, got {value!r}")
    return value


def load_config(path: Path) -> ThemeConfig:
    """
    Load configuration from a TOML file.

    A missing file yields the defaults. Relative paths are resolved against
    the directory containing the file.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return ThemeConfig()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    base_dir = path.parent
    theme_data = _table(data, "theme", {"source", "default_mode"})
    export_data = _table(data, "export", {"output_dir"})
    logging_data = _table(data, "logging", {"level"})

    try:
        default_mode = ColorMode(theme_data.get("default_mode", ColorMode.LIGHT))
    except ValueError:
        raise ConfigError(
            f"default_mode must be 'light' or 'dark', got {theme_data['default_mode']!r}"
        ) from None

    source = _path_value(theme_data, "theme", "source")
    output_dir = _path_value(export_data, "export", "output_dir")
    level = logging_data.get("level")
    if level is not None and str(level).upper() not in _LOG_LEVELS:
        raise ConfigError(f"Unknown logging level: {level!r}")

    return ThemeConfig(
        theme=ThemeSection(
            source=base_dir / source if source else None,
            default_mode=default_mode,
        ),
        export=ExportSection(output_dir=base_dir / (output_dir or ".")),
        logging=LoggingSection(level=str(level).upper() if level is not None else None),
    )
