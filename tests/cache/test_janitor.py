"""Tests for age-based cache eviction."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import pytest

from cargo_script.cache import clean_cache, save_metadata
from cargo_script.model import PackageMetadata

NOW_MS: int = 1_700_000_000_000
DAY_MS: int = 24 * 60 * 60 * 1000


def _slot(cache_root: Path, name: str, *, meta_mtime_ms: int | None) -> Path:
    """Create a slot; ``None`` leaves it without a metadata file."""
    slot = cache_root / name
    slot.mkdir()
    (slot / "Cargo.toml").write_text("[package]\n", encoding="utf-8")
    if meta_mtime_ms is not None:
        save_metadata(slot, PackageMetadata())
        mtime_ns = meta_mtime_ms * 1_000_000
        os.utime(slot / "metadata.json", ns=(mtime_ns, mtime_ns))
    return slot


def test_recent_slots_are_kept(cache_root: Path) -> None:
    slot = _slot(cache_root, "expr-recent", meta_mtime_ms=NOW_MS - DAY_MS)

    removed = clean_cache(cache_root, 7 * DAY_MS, now_ms=NOW_MS)

    assert removed == []
    assert slot.is_dir()


def test_old_slots_are_removed(cache_root: Path) -> None:
    old = _slot(cache_root, "expr-old", meta_mtime_ms=NOW_MS - 8 * DAY_MS)
    recent = _slot(cache_root, "expr-recent", meta_mtime_ms=NOW_MS)

    removed = clean_cache(cache_root, 7 * DAY_MS, now_ms=NOW_MS)

    assert removed == [old]
    assert not old.exists()
    assert recent.is_dir()


def test_slot_exactly_at_cutoff_is_kept(cache_root: Path) -> None:
    boundary = _slot(cache_root, "expr-boundary", meta_mtime_ms=NOW_MS - 7 * DAY_MS)
    just_older = _slot(cache_root, "expr-older", meta_mtime_ms=NOW_MS - 7 * DAY_MS - 1)

    clean_cache(cache_root, 7 * DAY_MS, now_ms=NOW_MS)

    assert boundary.is_dir()
    assert not just_older.exists()


def test_slot_without_metadata_is_removed(cache_root: Path) -> None:
    incomplete = _slot(cache_root, "expr-incomplete", meta_mtime_ms=None)

    assert clean_cache(cache_root, 7 * DAY_MS, now_ms=NOW_MS) == [incomplete]


def test_zero_max_age_removes_everything(cache_root: Path) -> None:
    slots = [
        _slot(cache_root, "expr-fresh", meta_mtime_ms=NOW_MS),
        _slot(cache_root, "expr-old", meta_mtime_ms=NOW_MS - 30 * DAY_MS),
        _slot(cache_root, "loop-broken", meta_mtime_ms=None),
    ]

    removed = clean_cache(cache_root, 0, now_ms=NOW_MS)

    assert sorted(removed) == sorted(slots)
    assert list(cache_root.iterdir()) == []


def test_zero_max_age_removes_slots_touched_in_the_future(cache_root: Path) -> None:
    _slot(cache_root, "expr-future", meta_mtime_ms=NOW_MS + DAY_MS)

    clean_cache(cache_root, 0, now_ms=NOW_MS)

    assert list(cache_root.iterdir()) == []


def test_plain_files_in_cache_root_are_ignored(cache_root: Path) -> None:
    stray = cache_root / "notes.txt"
    stray.write_text("keep me", encoding="utf-8")

    clean_cache(cache_root, 0, now_ms=NOW_MS)

    assert stray.is_file()


def test_missing_cache_root_is_a_no_op(tmp_path: Path) -> None:
    assert clean_cache(tmp_path / "absent", 0) == []


def test_removal_failure_does_not_stop_sweep(
    cache_root: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    stuck = _slot(cache_root, "expr-a-stuck", meta_mtime_ms=None)
    other = _slot(cache_root, "expr-b-other", meta_mtime_ms=None)
    real_rmtree = shutil.rmtree

    def flaky_rmtree(path: Path, *args: object, **kwargs: object) -> None:
        if Path(path) == stuck:
            raise PermissionError("denied")
        real_rmtree(path)

    monkeypatch.setattr("cargo_script.cache.janitor.shutil.rmtree", flaky_rmtree)

    removed = clean_cache(cache_root, 0, now_ms=NOW_MS)

    assert removed == [other]
    assert stuck.is_dir()
    assert "failed to remove" in caplog.text
