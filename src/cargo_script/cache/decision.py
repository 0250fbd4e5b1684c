"""Decide whether a cached package can be executed or must be rebuilt."""

from __future__ import annotations

import logging
from pathlib import Path

from cargo_script.cache.identity import IdentityHasher
from cargo_script.cache.metadata import load_metadata
from cargo_script.cache.paths import executable_path
from cargo_script.exceptions import CacheCorruptionError
from cargo_script.model import CacheAction, CachePlan, PackageMetadata, ScriptInput
from cargo_script.types import DependencyList

logger = logging.getLogger(__name__)


def cache_action_for(
    script_input: ScriptInput,
    *,
    debug: bool,
    deps: DependencyList,
    cache_root: Path,
    hasher: IdentityHasher | None = None,
) -> CachePlan:
    """Work out the cache slot for an input and whether it needs compiling.

    Any problem with the stored metadata means a rebuild; it is never an error.
    """
    hasher = hasher or IdentityHasher()
    slot_path = cache_root / hasher.compute_id(script_input, deps)
    logger.debug("pkg_path: %s", slot_path)

    input_meta = PackageMetadata.for_input(script_input, debug=debug, deps=deps)
    logger.debug("input_meta: %r", input_meta)

    def compile_plan() -> CachePlan:
        return CachePlan(action=CacheAction.COMPILE, slot_path=slot_path, metadata=input_meta)

    try:
        cache_meta = load_metadata(slot_path)
    except CacheCorruptionError as exc:
        logger.info("recompiling because: failed to load metadata")
        logger.debug("load_metadata error: %s", exc)
        return compile_plan()

    if cache_meta != input_meta:
        logger.info("recompiling because: metadata did not match")
        logger.debug("input metadata: %r", input_meta)
        logger.debug("cache metadata: %r", cache_meta)
        return compile_plan()

    exe_path = executable_path(slot_path, script_input, input_meta)
    if not exe_path.is_file():
        logger.info("recompiling because: executable doesn't exist or isn't a file")
        return compile_plan()

    return CachePlan(action=CacheAction.EXECUTE, slot_path=slot_path, metadata=input_meta)
