"""Input variants, package metadata and cache decisions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TypeAlias

from cargo_script.constants.cache import PROFILE_DEBUG, PROFILE_RELEASE
from cargo_script.types import DependencyList, MetadataPayload

EXPR_SAFE_NAME: str = "expr"
LOOP_SAFE_NAME: str = "loop"


@dataclass(frozen=True)
class FileInput:
    """A script file on disk.

    ``modified`` is the file's last-modified time in milliseconds since the epoch.
    """

    name: str
    path: Path
    content: str
    modified: int


@dataclass(frozen=True)
class ExprInput:
    """A literal expression whose value is printed."""

    content: str


@dataclass(frozen=True)
class LoopInput:
    """A closure invoked once per line of stdin.

    With ``count`` set the closure also receives the 1-based line number.
    """

    content: str
    count: bool = False


ScriptInput: TypeAlias = FileInput | ExprInput | LoopInput


def safe_name(script_input: ScriptInput) -> str:
    """Return the filesystem-safe package name for an input."""
    if isinstance(script_input, FileInput):
        return script_input.name
    if isinstance(script_input, ExprInput):
        return EXPR_SAFE_NAME
    if isinstance(script_input, LoopInput):
        return LOOP_SAFE_NAME
    raise TypeError(f"Unsupported input type: {type(script_input).__name__}")


@dataclass(frozen=True)
class PackageMetadata:
    """Everything that must match for a cached executable to be reused."""

    path: str | None = None
    modified: int | None = None
    debug: bool = False
    deps: DependencyList = field(default_factory=tuple)

    @classmethod
    def for_input(cls, script_input: ScriptInput, *, debug: bool, deps: DependencyList) -> PackageMetadata:
        """Build the metadata describing ``script_input`` as it is right now."""
        if isinstance(script_input, FileInput):
            return cls(
                path=str(script_input.path),
                modified=script_input.modified,
                debug=debug,
                deps=tuple(deps),
            )
        if isinstance(script_input, (ExprInput, LoopInput)):
            return cls(debug=debug, deps=tuple(deps))
        raise TypeError(f"Unsupported input type: {type(script_input).__name__}")

    @property
    def profile(self) -> str:
        """Cargo profile directory name for this build."""
        return PROFILE_DEBUG if self.debug else PROFILE_RELEASE

    def to_dict(self) -> MetadataPayload:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "path": self.path,
            "modified": self.modified,
            "debug": self.debug,
            "deps": [[name, version] for name, version in self.deps],
        }


class CacheAction(Enum):
    """What to do with the input for this invocation."""

    COMPILE = "compile"
    EXECUTE = "execute"


@dataclass(frozen=True)
class CachePlan:
    """Outcome of the cache decision for one input."""

    action: CacheAction
    slot_path: Path
    metadata: PackageMetadata
