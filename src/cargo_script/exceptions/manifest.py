"""Input, dependency and manifest exceptions."""

from __future__ import annotations

from cargo_script.exceptions.base import UserError


class ScriptNotFoundError(UserError):
    """Raised when a script path cannot be resolved to a readable file."""


class DependencySpecError(UserError):
    """Raised when a ``--dep`` spec has an empty name or version."""


class DependencyConflictError(UserError):
    """Raised when the same dependency is requested with different versions."""

    def __init__(self, name: str, existing: str, requested: str) -> None:
        super().__init__(f"conflicting versions for dependency '{name}': '{existing}', '{requested}'")
        self.name = name
        self.existing = existing
        self.requested = requested


class NoSourceFoundError(UserError):
    """Raised when a script contains an embedded manifest but no Rust source."""


class ManifestParseError(UserError):
    """Raised when an embedded or generated manifest is not valid TOML."""


class MergeConflictError(UserError):
    """Raised when a table and a non-table value meet under the same manifest key."""
