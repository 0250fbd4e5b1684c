"""User configuration loading for cargo-script."""

from __future__ import annotations

from cargo_script.config.loader import default_config_path, load_config
from cargo_script.config.model import ScriptConfig

__all__ = ["ScriptConfig", "default_config_path", "load_config"]
