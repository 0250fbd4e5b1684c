"""Branding constants for terminal output."""

from __future__ import annotations

PROG_NAME: str = "cargo-script"
CARGO_SUBCOMMAND: str = "script"
CLI_DESCRIPTION: str = 'Compiles and runs "Cargoified Rust scripts".'
CLI_USAGE: str = "cargo script [FLAGS OPTIONS] [--] <script> <args>..."

NO_ARGS_MESSAGE: str = "\n".join(
    (
        "Usage: cargo script [FLAGS OPTIONS] [--] <script> <args>...",
        "",
        "Run `cargo script --help` for more information.",
    )
)
CACHE_CLEARED_MESSAGE: str = "cargo script cache cleared."
