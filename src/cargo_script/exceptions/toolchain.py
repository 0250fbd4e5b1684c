"""Build toolchain exceptions."""

from __future__ import annotations

from cargo_script.exceptions.base import CargoScriptError


class ToolchainError(CargoScriptError):
    """Raised when Cargo cannot be launched or exits unsuccessfully."""
