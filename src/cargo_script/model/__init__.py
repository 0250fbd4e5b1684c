"""Core data models for cargo-script."""

from .entities import (
    CacheAction,
    CachePlan,
    ExprInput,
    FileInput,
    LoopInput,
    PackageMetadata,
    ScriptInput,
    safe_name,
)

__all__ = [
    "CacheAction",
    "CachePlan",
    "ExprInput",
    "FileInput",
    "LoopInput",
    "PackageMetadata",
    "ScriptInput",
    "safe_name",
]
