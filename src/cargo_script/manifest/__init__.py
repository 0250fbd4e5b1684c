"""Embedded manifest extraction, dependency handling and manifest merging."""

from __future__ import annotations

from cargo_script.manifest.builder import build_package_sources, default_manifest, dependency_manifest
from cargo_script.manifest.dependencies import parse_dependency_specs
from cargo_script.manifest.merge import merge_manifest
from cargo_script.manifest.split import split_input, wrap_source

__all__ = [
    "build_package_sources",
    "default_manifest",
    "dependency_manifest",
    "merge_manifest",
    "parse_dependency_specs",
    "split_input",
    "wrap_source",
]
