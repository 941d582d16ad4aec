"""Configuration loading and management for Growth Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in EngineConfig)
    2. Global config (~/.growth-insight.toml)
    3. Project config (./growth-insight.toml)
    4. Explicit config file
    5. Environment variables (GROWTH_* prefix)
    6. CLI overrides (passed as kwargs)

The calibration constants of the metrics themselves (size and density
saturation points, blend weights, pattern thresholds) are not configurable;
they live in ``growth_insight.analytics``. Only the trailing windows and
display limits are.

Example:
    >>> config = load_config(top_languages=5)
    >>> config.top_languages
    5
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class EngineConfig:
    """Windows and limits used when running the analytics engine.

    Attributes:
        growth_window_days: Trailing window for the skill growth trend
        new_language_window_days: Trailing window for new-language detection
        top_languages: How many languages the growth ranking returns
        history_days: Trailing history kept by the ingestion filter
        verbosity: Logging verbosity level
    """

    growth_window_days: int = 90
    new_language_window_days: int = 90
    top_languages: int = 3
    history_days: int = 365
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.growth_window_days < 0:
            raise ValueError("growth_window_days must be non-negative")
        if self.new_language_window_days < 0:
            raise ValueError("new_language_window_days must be non-negative")
        if self.top_languages < 1:
            raise ValueError("top_languages must be at least 1")
        if self.history_days < 1:
            raise ValueError("history_days must be at least 1")
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise ValueError(f"verbosity must be one of {', '.join(_VERBOSITY_LEVELS)}")


DEFAULT_CONFIG = EngineConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> EngineConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        Validated EngineConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".growth-insight.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "growth-insight.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    # Boolean verbosity flags from the CLI
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return EngineConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise ConfigurationError(str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from GROWTH_* environment variables.

    Supported environment variables:
        GROWTH_GROWTH_WINDOW_DAYS: int
        GROWTH_NEW_LANGUAGE_WINDOW_DAYS: int
        GROWTH_TOP_LANGUAGES: int
        GROWTH_HISTORY_DAYS: int
        GROWTH_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any GROWTH_* vars found.
    """
    type_hints = get_type_hints(EngineConfig)

    result: dict[str, Any] = {}

    for field_name in EngineConfig.__dataclass_fields__:
        env_key = f"GROWTH_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    A ``[growth]`` table is used when present, otherwise the top level.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("growth", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [growth] must be a table")
    return section
