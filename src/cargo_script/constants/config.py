"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_ENV_VAR: str = "CARGO_SCRIPT_CONFIG"
CONFIG_DIRNAME: str = "cargo-script"
CONFIG_FILENAME: str = "config.yaml"

CARGO_HOME_ENV_VAR: str = "CARGO_HOME"
LOCAL_APP_DATA_ENV_VAR: str = "LOCALAPPDATA"

DEFAULT_CARGO_EXECUTABLE: str = "cargo"
DEFAULT_SEARCH_EXTENSIONS: tuple[str, ...] = ("crs", "rs")

CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "cache_dir",
        "max_cache_age_days",
        "cargo",
        "search_extensions",
    }
)
