"""Config loading and validation for cargo-script."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from cargo_script.cache.paths import default_cache_root
from cargo_script.config.model import ScriptConfig
from cargo_script.constants.cache import DEFAULT_MAX_CACHE_AGE_DAYS
from cargo_script.constants.config import (
    CONFIG_DIRNAME,
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    CONFIG_KEYS,
    DEFAULT_CARGO_EXECUTABLE,
    DEFAULT_SEARCH_EXTENSIONS,
)
from cargo_script.exceptions import ConfigError


def default_config_path() -> Path:
    """Return the config path from ``$CARGO_SCRIPT_CONFIG`` or the user config dir."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / CONFIG_DIRNAME / CONFIG_FILENAME


def load_config(config_path: Path | None = None) -> ScriptConfig:
    """Load settings from an explicit path, or the default location when present."""
    path = config_path if config_path is not None else default_config_path()
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ScriptConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Could not read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    cache_dir_raw = raw.get("cache_dir")
    if cache_dir_raw is None:
        cache_dir = default_cache_root()
    elif isinstance(cache_dir_raw, str) and cache_dir_raw.strip():
        cache_dir = Path(cache_dir_raw).expanduser()
    else:
        raise ConfigError("cache_dir must be a non-empty string")

    max_age = raw.get("max_cache_age_days", DEFAULT_MAX_CACHE_AGE_DAYS)
    if isinstance(max_age, bool) or not isinstance(max_age, int) or max_age <= 0:
        raise ConfigError("max_cache_age_days must be a positive integer")

    cargo = raw.get("cargo", DEFAULT_CARGO_EXECUTABLE)
    if not isinstance(cargo, str) or not cargo.strip():
        raise ConfigError("cargo must be a non-empty string")

    search_extensions = tuple(
        ext.strip().lstrip(".")
        for ext in _ensure_string_list(
            raw.get("search_extensions", list(DEFAULT_SEARCH_EXTENSIONS)),
            "search_extensions",
        )
        if ext.strip()
    )

    return ScriptConfig(
        cache_dir=cache_dir,
        max_cache_age_days=max_age,
        cargo=cargo.strip(),
        search_extensions=search_extensions,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
