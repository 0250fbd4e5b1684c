"""Cache directory layout."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from cargo_script.constants.cache import (
    CACHE_DIRNAME,
    CACHE_VENDOR_DIRNAME,
    CARGO_HOME_DIRNAME,
    MANIFEST_FILENAME,
    METADATA_FILENAME,
    SOURCE_EXTENSION,
    TARGET_DIRNAME,
)
from cargo_script.constants.config import CARGO_HOME_ENV_VAR, LOCAL_APP_DATA_ENV_VAR
from cargo_script.model import PackageMetadata, ScriptInput, safe_name

EXE_SUFFIX: str = ".exe" if sys.platform == "win32" else ""


def default_cache_root() -> Path:
    """Return the platform default cache root for generated packages."""
    cargo_home = os.environ.get(CARGO_HOME_ENV_VAR)
    if cargo_home:
        return Path(cargo_home) / CACHE_DIRNAME

    if sys.platform == "win32":
        local_app_data = os.environ.get(LOCAL_APP_DATA_ENV_VAR)
        if local_app_data:
            return Path(local_app_data) / CACHE_VENDOR_DIRNAME / CACHE_DIRNAME

    return Path.home() / CARGO_HOME_DIRNAME / CACHE_DIRNAME


def metadata_path(slot_path: Path) -> Path:
    """Path of the metadata file inside a cache slot."""
    return slot_path / METADATA_FILENAME


def manifest_path(slot_path: Path) -> Path:
    """Path of the generated ``Cargo.toml`` inside a cache slot."""
    return slot_path / MANIFEST_FILENAME


def source_path(slot_path: Path, script_input: ScriptInput) -> Path:
    """Path of the generated Rust source inside a cache slot."""
    return slot_path / f"{safe_name(script_input)}{SOURCE_EXTENSION}"


def executable_path(slot_path: Path, script_input: ScriptInput, metadata: PackageMetadata) -> Path:
    """Where Cargo leaves the compiled executable for this package."""
    return slot_path / TARGET_DIRNAME / metadata.profile / f"{safe_name(script_input)}{EXE_SUFFIX}"
