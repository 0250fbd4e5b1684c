"""Shared constants for cargo-script."""
