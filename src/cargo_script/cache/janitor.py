"""Age-based eviction of cache slots."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from cargo_script.cache.paths import metadata_path
from cargo_script.io import current_time_ms, file_last_modified_ms

logger = logging.getLogger(__name__)


def clean_cache(cache_root: Path, max_age_ms: int, *, now_ms: int | None = None) -> list[Path]:
    """Remove cache slots whose metadata file is older than ``max_age_ms``.

    Staleness is judged by the metadata file's own modification time, not by
    anything recorded inside it: expressions and loops have no source
    timestamp of their own. Slots without readable metadata are incomplete and
    always removed. ``max_age_ms == 0`` removes every slot.

    Failures to delete a slot are logged and the sweep carries on. Returns the
    slots that were removed.
    """
    logger.info("cleaning cache with max_age: %d ms", max_age_ms)
    if not cache_root.is_dir():
        logger.info("cache directory %s does not exist; nothing to clean", cache_root)
        return []

    now_ms = current_time_ms() if now_ms is None else now_ms
    cutoff = now_ms - max_age_ms
    logger.debug("cutoff: %d ms", cutoff)

    removed: list[Path] = []
    for slot_path in sorted(cache_root.iterdir()):
        if not slot_path.is_dir():
            continue

        logger.debug("checking: %s", slot_path)
        if not _is_expired(slot_path, cutoff=cutoff, clear_all=max_age_ms == 0):
            continue

        logger.info("removing %s", slot_path)
        try:
            shutil.rmtree(slot_path)
        except OSError as exc:
            logger.error("failed to remove %s from cache: %s", slot_path, exc)
            continue
        removed.append(slot_path)

    logger.info("done cleaning cache.")
    return removed


def _is_expired(slot_path: Path, *, cutoff: int, clear_all: bool) -> bool:
    try:
        meta_mtime = file_last_modified_ms(metadata_path(slot_path))
    except OSError:
        logger.info("couldn't open metadata for %s", slot_path)
        return True

    logger.debug("meta_mtime: %d ms", meta_mtime)
    return clear_all or meta_mtime < cutoff
