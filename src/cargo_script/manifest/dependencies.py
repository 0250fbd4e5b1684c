"""Parsing of ``--dep`` dependency specs."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cargo_script.constants.splitting import DEFAULT_DEPENDENCY_VERSION, DEPENDENCY_SEPARATOR
from cargo_script.exceptions import DependencyConflictError, DependencySpecError
from cargo_script.types import Dependency, DependencyList

logger = logging.getLogger(__name__)


def parse_dependency_specs(specs: Iterable[str]) -> DependencyList:
    """Turn ``name`` / ``name=version`` specs into a sorted dependency list.

    A bare name means any version (``*``). Repeating a dependency is allowed
    only when the version text is identical; nothing is resolved.
    """
    deps: dict[str, str] = {}
    for spec in specs:
        name, version = parse_dependency_spec(spec)
        existing = deps.get(name)
        if existing is None:
            deps[name] = version
        elif existing != version:
            raise DependencyConflictError(name, existing, version)

    resolved = tuple(sorted(deps.items()))
    logger.debug("deps: %r", resolved)
    return resolved


def parse_dependency_spec(spec: str) -> Dependency:
    """Split one spec on its first ``=``; a bare name means any version."""
    name, separator, version = spec.partition(DEPENDENCY_SEPARATOR)
    if not separator:
        version = DEFAULT_DEPENDENCY_VERSION

    if not name:
        raise DependencySpecError("cannot have empty dependency package name")
    if not version:
        raise DependencySpecError("cannot have empty dependency version")
    return name, version
