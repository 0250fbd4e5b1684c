"""Shared exception hierarchy for cargo-script."""

from __future__ import annotations

from .base import CargoScriptError, InternalError, UserError
from .cache import CacheCorruptionError, MetadataCorruptError, MetadataNotFoundError
from .config import ConfigError
from .manifest import (
    DependencyConflictError,
    DependencySpecError,
    ManifestParseError,
    MergeConflictError,
    NoSourceFoundError,
    ScriptNotFoundError,
)
from .toolchain import ToolchainError

__all__ = [
    "CacheCorruptionError",
    "CargoScriptError",
    "ConfigError",
    "DependencyConflictError",
    "DependencySpecError",
    "InternalError",
    "ManifestParseError",
    "MergeConflictError",
    "MetadataCorruptError",
    "MetadataNotFoundError",
    "NoSourceFoundError",
    "ScriptNotFoundError",
    "ToolchainError",
    "UserError",
]
