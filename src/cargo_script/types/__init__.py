"""Shared type aliases for cargo-script."""

from .common import Dependency, DependencyList, ManifestTable, ManifestValue
from .metadata import MetadataPayload

__all__ = [
    "Dependency",
    "DependencyList",
    "ManifestTable",
    "ManifestValue",
    "MetadataPayload",
]
