"""Cargo build toolchain integration."""

from __future__ import annotations

from cargo_script.toolchain.cargo import CargoToolchain, extract_lib_names

__all__ = ["CargoToolchain", "extract_lib_names"]
