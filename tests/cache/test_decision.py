"""Tests for the compile-or-execute cache decision."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

import pytest

from cargo_script.cache import IdentityHasher, cache_action_for, executable_path, save_metadata
from cargo_script.model import CacheAction, CachePlan, ExprInput, FileInput, PackageMetadata, ScriptInput


def _populate(plan: CachePlan, script_input: ScriptInput, *, metadata: PackageMetadata | None = None) -> Path:
    """Make the slot look like a finished build."""
    save_metadata(plan.slot_path, metadata or plan.metadata)
    exe = executable_path(plan.slot_path, script_input, plan.metadata)
    exe.parent.mkdir(parents=True, exist_ok=True)
    exe.write_text("binary", encoding="utf-8")
    return exe


def test_empty_cache_compiles(cache_root: Path) -> None:
    plan = cache_action_for(ExprInput("1"), debug=False, deps=(), cache_root=cache_root)

    assert plan.action is CacheAction.COMPILE
    assert plan.slot_path.parent == cache_root
    assert plan.metadata == PackageMetadata(debug=False, deps=())


def test_matching_metadata_and_executable_executes(
    cache_root: Path,
    make_file_input: Callable[..., FileInput],
) -> None:
    script_input = make_file_input()
    first = cache_action_for(script_input, debug=False, deps=(("time", "*"),), cache_root=cache_root)
    _populate(first, script_input)

    second = cache_action_for(script_input, debug=False, deps=(("time", "*"),), cache_root=cache_root)

    assert second.action is CacheAction.EXECUTE
    assert second.slot_path == first.slot_path


@pytest.mark.parametrize(
    "changes",
    [
        {"path": "/elsewhere/hello.rs"},
        {"modified": 2_000},
        {"debug": True},
        {"deps": (("time", "0.2"),)},
    ],
    ids=["path", "modified", "debug", "deps"],
)
def test_any_field_mismatch_compiles(
    cache_root: Path,
    make_file_input: Callable[..., FileInput],
    changes: dict[str, object],
) -> None:
    script_input = make_file_input()
    plan = cache_action_for(script_input, debug=False, deps=(("time", "*"),), cache_root=cache_root)
    _populate(plan, script_input, metadata=replace(plan.metadata, **changes))

    again = cache_action_for(script_input, debug=False, deps=(("time", "*"),), cache_root=cache_root)

    assert again.action is CacheAction.COMPILE


def test_touched_file_compiles(cache_root: Path, make_file_input: Callable[..., FileInput]) -> None:
    original = make_file_input(modified=1_000)
    _populate(cache_action_for(original, debug=False, deps=(), cache_root=cache_root), original)

    edited = replace(original, modified=5_000)

    assert cache_action_for(edited, debug=False, deps=(), cache_root=cache_root).action is CacheAction.COMPILE


def test_debug_flag_changes_decision_for_expressions(cache_root: Path) -> None:
    script_input = ExprInput("1 + 2")
    _populate(cache_action_for(script_input, debug=False, deps=(), cache_root=cache_root), script_input)

    plan = cache_action_for(script_input, debug=True, deps=(), cache_root=cache_root)

    assert plan.action is CacheAction.COMPILE


def test_missing_executable_compiles(cache_root: Path) -> None:
    script_input = ExprInput("1")
    plan = cache_action_for(script_input, debug=False, deps=(), cache_root=cache_root)
    exe = _populate(plan, script_input)
    exe.unlink()

    assert cache_action_for(script_input, debug=False, deps=(), cache_root=cache_root).action is CacheAction.COMPILE


def test_executable_directory_is_not_a_file(cache_root: Path) -> None:
    script_input = ExprInput("1")
    plan = cache_action_for(script_input, debug=False, deps=(), cache_root=cache_root)
    exe = _populate(plan, script_input)
    exe.unlink()
    exe.mkdir()

    assert cache_action_for(script_input, debug=False, deps=(), cache_root=cache_root).action is CacheAction.COMPILE


def test_corrupt_metadata_compiles(cache_root: Path) -> None:
    script_input = ExprInput("1")
    plan = cache_action_for(script_input, debug=False, deps=(), cache_root=cache_root)
    _populate(plan, script_input)
    (plan.slot_path / "metadata.json").write_text("{not json", encoding="utf-8")

    assert cache_action_for(script_input, debug=False, deps=(), cache_root=cache_root).action is CacheAction.COMPILE


def test_release_and_debug_artifacts_live_in_profile_dirs(cache_root: Path) -> None:
    hasher = IdentityHasher(stub_hashes=True)
    script_input = ExprInput("1")
    release = cache_action_for(script_input, debug=False, deps=(), cache_root=cache_root, hasher=hasher)
    debug = cache_action_for(script_input, debug=True, deps=(), cache_root=cache_root, hasher=hasher)

    assert release.slot_path == cache_root / "expr-stub"
    assert executable_path(release.slot_path, script_input, release.metadata).parent == (
        cache_root / "expr-stub" / "target" / "release"
    )
    assert executable_path(debug.slot_path, script_input, debug.metadata).parent == (
        cache_root / "expr-stub" / "target" / "debug"
    )
