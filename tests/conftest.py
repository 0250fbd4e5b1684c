"""Shared pytest fixtures for cargo-script tests."""

from __future__ import annotations

import os
import time
import tomllib
from collections.abc import Callable
from pathlib import Path

import pytest

from cargo_script.cache.paths import EXE_SUFFIX
from cargo_script.exceptions import ToolchainError
from cargo_script.model import FileInput


class FakeToolchain:
    """Stands in for Cargo: records calls and drops an executable where Cargo would.

    The verbose build leaves a dep-info file stamped a few seconds ahead, as a
    coarse-timestamp filesystem can, so tests can check the real source is
    still seen as newer when the second build starts.
    """

    def __init__(self, *, fail: bool = False, extern_libs: tuple[str, ...] = ()) -> None:
        self.fail = fail
        self.extern_libs = extern_libs
        self.builds: list[tuple[Path, bool]] = []
        self.verbose_builds: list[Path] = []
        self.source_stamps: list[tuple[int, int | None]] = []

    def build(self, manifest_path: Path, *, debug: bool) -> None:
        self.builds.append((manifest_path, debug))
        if self.fail:
            raise ToolchainError("cargo failed with status 101")

        manifest = tomllib.loads(manifest_path.read_text(encoding="utf-8"))
        name = manifest["package"]["name"]
        target = manifest_path.parent / "target"
        outputs = [entry.stat().st_mtime_ns for entry in target.rglob("*") if entry.is_file()] if target.is_dir() else []
        source = manifest_path.parent / f"{name}.rs"
        self.source_stamps.append((source.stat().st_mtime_ns, max(outputs, default=None)))

        exe = target / ("debug" if debug else "release") / f"{name}{EXE_SUFFIX}"
        exe.parent.mkdir(parents=True, exist_ok=True)
        exe.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")

    def capture_verbose_build(self, manifest_path: Path) -> str:
        self.verbose_builds.append(manifest_path)
        manifest = tomllib.loads(manifest_path.read_text(encoding="utf-8"))
        name = manifest["package"]["name"]

        dep_info = manifest_path.parent / "target" / "debug" / ".fingerprint" / f"{name}-stub" / f"dep-bin-{name}"
        dep_info.parent.mkdir(parents=True, exist_ok=True)
        dep_info.write_text("", encoding="utf-8")
        ahead = time.time_ns() + 5 * 1_000_000_000
        os.utime(dep_info, ns=(ahead, ahead))

        externs = " ".join(f"--extern {lib}=/deps/lib{lib}.rlib" for lib in self.extern_libs)
        return (
            f"   Compiling {name} v0.1.0\n"
            f"     Running `rustc --crate-name {name} {name}.rs --crate-type bin {externs}`\n"
        )


@pytest.fixture()
def cache_root(tmp_path: Path) -> Path:
    """Return an empty cache root directory."""
    root = tmp_path / "script-cache"
    root.mkdir()
    return root


@pytest.fixture()
def fake_toolchain() -> FakeToolchain:
    """Return a toolchain that always builds successfully."""
    return FakeToolchain()


@pytest.fixture()
def make_file_input(tmp_path: Path) -> Callable[..., FileInput]:
    """Return a factory for file inputs backed by real files under ``tmp_path``."""

    def _make(content: str = "fn main() {}\n", *, name: str = "hello", modified: int = 1_000) -> FileInput:
        path = tmp_path / "scripts" / f"{name}.rs"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return FileInput(name=name, path=path, content=content, modified=modified)

    return _make


@pytest.fixture()
def make_toolchain() -> Callable[..., FakeToolchain]:
    """Return a factory for fake toolchains with custom behaviour."""
    return FakeToolchain
