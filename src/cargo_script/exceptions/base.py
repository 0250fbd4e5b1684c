"""Base exception types for cargo-script."""

from __future__ import annotations


class CargoScriptError(Exception):
    """Base class for all cargo-script errors."""


class UserError(CargoScriptError, ValueError):
    """Raised for problems the user can fix by changing their input or flags."""


class InternalError(CargoScriptError):
    """Raised for unexpected failures that are not actionable by the user."""
