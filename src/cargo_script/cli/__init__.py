"""Command-line interface for cargo-script."""
