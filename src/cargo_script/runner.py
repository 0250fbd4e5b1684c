"""End-to-end handling of a single cargo-script invocation."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from cargo_script.cache import IdentityHasher, cache_action_for, clean_cache, executable_path
from cargo_script.compiler import Toolchain, compile_package
from cargo_script.config import ScriptConfig
from cargo_script.exceptions import InternalError
from cargo_script.inputs import resolve_input
from cargo_script.manifest import parse_dependency_specs
from cargo_script.model import CacheAction
from cargo_script.toolchain import CargoToolchain

logger = logging.getLogger(__name__)


def run_script(
    script: str,
    *,
    config: ScriptConfig,
    args: Sequence[str] = (),
    expr: bool = False,
    loop: bool = False,
    count: bool = False,
    deps: Sequence[str] = (),
    debug: bool = False,
    force: bool = False,
    build_only: bool = False,
    sweep: bool = True,
    toolchain: Toolchain | None = None,
    hasher: IdentityHasher | None = None,
) -> int:
    """Build ``script`` if needed, then run it and return its exit status.

    Unless ``sweep`` is off, old cache slots are evicted afterwards whether or
    not the run succeeded.
    """
    try:
        return _build_and_run(
            script,
            config=config,
            args=args,
            expr=expr,
            loop=loop,
            count=count,
            deps=deps,
            debug=debug,
            force=force,
            build_only=build_only,
            toolchain=toolchain or CargoToolchain(config.cargo),
            hasher=hasher or IdentityHasher(),
        )
    finally:
        if sweep:
            sweep_cache(config)


def clear_cache(config: ScriptConfig) -> None:
    """Remove every slot from the cache."""
    clean_cache(config.cache_dir, 0)


def sweep_cache(config: ScriptConfig) -> None:
    """Evict slots older than the configured maximum age."""
    try:
        clean_cache(config.cache_dir, config.max_cache_age_ms)
    except OSError as exc:
        logger.error("failed to clean cache %s: %s", config.cache_dir, exc)


def _build_and_run(
    script: str,
    *,
    config: ScriptConfig,
    args: Sequence[str],
    expr: bool,
    loop: bool,
    count: bool,
    deps: Sequence[str],
    debug: bool,
    force: bool,
    build_only: bool,
    toolchain: Toolchain,
    hasher: IdentityHasher,
) -> int:
    script_input = resolve_input(
        script,
        expr=expr,
        loop=loop,
        count=count,
        search_extensions=config.search_extensions,
    )
    dependencies = parse_dependency_specs(deps)

    plan = cache_action_for(
        script_input,
        debug=debug,
        deps=dependencies,
        cache_root=config.cache_dir,
        hasher=hasher,
    )
    logger.info("action: %s", plan.action.value)

    if plan.action is CacheAction.COMPILE or force:
        logger.info("compiling %s", plan.slot_path)
        compile_package(script_input, plan.metadata, plan.slot_path, toolchain=toolchain)

    if build_only:
        return 0

    exe_path = executable_path(plan.slot_path, script_input, plan.metadata)
    if not exe_path.is_file():
        raise InternalError(f"compiled executable is missing: {exe_path}")

    logger.info("executing %s", exe_path)
    try:
        completed = subprocess.run([str(exe_path), *args], check=False)
    except OSError as exc:
        raise InternalError(f"failed to execute {exe_path}: {exc}") from exc
    return completed.returncode if completed.returncode >= 0 else 1
