"""Cache state exceptions.

These never reach the user: callers downgrade them to a rebuild.
"""

from __future__ import annotations

from cargo_script.exceptions.base import CargoScriptError


class CacheCorruptionError(CargoScriptError):
    """Raised when cached package state cannot be trusted."""


class MetadataNotFoundError(CacheCorruptionError):
    """Raised when a cache slot has no metadata file."""


class MetadataCorruptError(CacheCorruptionError):
    """Raised when a metadata file cannot be read or does not parse."""
