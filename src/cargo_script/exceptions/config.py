"""Configuration-related exceptions."""

from __future__ import annotations

from cargo_script.exceptions.base import UserError


class ConfigError(UserError):
    """Raised when the cargo-script configuration file is invalid."""
