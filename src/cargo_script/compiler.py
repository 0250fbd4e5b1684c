"""Generation and compilation of a script's Cargo package."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

from cargo_script.cache import SlotGuard, save_metadata
from cargo_script.cache.paths import manifest_path, source_path
from cargo_script.constants.cache import (
    PACKAGE_TEMP_PREFIX,
    PACKAGE_TEMP_SUFFIX,
    SOURCE_MTIME_LEAD_NS,
    TARGET_DIRNAME,
)
from cargo_script.constants.templates import (
    ENTRY_POINT_STUB,
    ENTRY_POINT_TOKEN,
    EXTERN_CRATE_LINE,
    WRAPPED_MAIN,
)
from cargo_script.io import write_text_atomic
from cargo_script.manifest import build_package_sources
from cargo_script.model import PackageMetadata, ScriptInput, safe_name
from cargo_script.toolchain import extract_lib_names

logger = logging.getLogger(__name__)


class Toolchain(Protocol):
    """The build operations :func:`compile_package` needs."""

    def build(self, manifest_path: Path, *, debug: bool) -> None: ...

    def capture_verbose_build(self, manifest_path: Path) -> str: ...


def compile_package(
    script_input: ScriptInput,
    metadata: PackageMetadata,
    slot_path: Path,
    *,
    toolchain: Toolchain,
) -> None:
    """Write the package for ``script_input`` into ``slot_path`` and build it.

    Metadata is written only after a successful build. If anything fails the
    slot is removed, so the next run rebuilds from scratch.
    """
    manifest_text, source = build_package_sources(script_input, metadata.deps)

    with SlotGuard(slot_path) as guard:
        mani_path = manifest_path(slot_path)
        _write_package_file(mani_path, manifest_text)

        script_path = source_path(slot_path, script_input)
        if ENTRY_POINT_TOKEN not in source:
            lib_names = _discover_lib_names(script_path, mani_path, safe_name(script_input), toolchain)
            _write_package_file(script_path, render_with_externs(source, lib_names))
            # Cargo must see the real source as newer than the stub build's dep-info.
            _stamp_after_outputs(script_path, slot_path / TARGET_DIRNAME)
        else:
            _write_package_file(script_path, source)

        toolchain.build(mani_path, debug=metadata.debug)

        # The cache is judged by this file, so it must only exist for finished builds.
        save_metadata(slot_path, metadata)
        guard.disarm()


def render_with_externs(source: str, lib_names: list[str]) -> str:
    """Wrap bare statements in ``fn main`` and declare the linked crates."""
    externs = "".join(EXTERN_CRATE_LINE.format(name=name) for name in lib_names)
    return externs + WRAPPED_MAIN.format(body=source.strip())


def _discover_lib_names(script_path: Path, mani_path: Path, crate_name: str, toolchain: Toolchain) -> list[str]:
    _write_package_file(script_path, ENTRY_POINT_STUB)
    output = toolchain.capture_verbose_build(mani_path)
    lib_names = extract_lib_names(output, crate_name)
    logger.info("linked libraries for %s: %s", crate_name, ", ".join(lib_names) or "<none>")
    return lib_names


def _stamp_after_outputs(script_path: Path, target_dir: Path) -> None:
    """Set the mtime of ``script_path`` past every file under ``target_dir``."""
    if not target_dir.is_dir():
        return
    newest = max(
        (entry.stat().st_mtime_ns for entry in target_dir.rglob("*") if entry.is_file()),
        default=None,
    )
    if newest is None:
        return
    stamp = max(script_path.stat().st_mtime_ns, newest + SOURCE_MTIME_LEAD_NS)
    logger.debug("source mtime for %s: %d ns", script_path, stamp)
    os.utime(script_path, ns=(stamp, stamp))


def _write_package_file(path: Path, content: str) -> None:
    write_text_atomic(path=path, content=content, temp_prefix=PACKAGE_TEMP_PREFIX, temp_suffix=PACKAGE_TEMP_SUFFIX)
