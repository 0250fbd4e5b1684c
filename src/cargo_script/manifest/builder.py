"""Assembly of the final Cargo manifest and package source."""

from __future__ import annotations

import logging
import tomllib

import tomli_w

from cargo_script.constants.splitting import DEPENDENCIES_TABLE, INLINE_TABLE_PREFIX
from cargo_script.constants.templates import DEFAULT_MANIFEST, NAME_PLACEHOLDER
from cargo_script.exceptions import ManifestParseError
from cargo_script.manifest.merge import merge_manifest
from cargo_script.manifest.split import split_input, wrap_source
from cargo_script.model import ScriptInput, safe_name
from cargo_script.types import DependencyList, ManifestTable, ManifestValue

logger = logging.getLogger(__name__)

_INLINE_VALUE_KEY: str = "value"


def build_package_sources(script_input: ScriptInput, deps: DependencyList) -> tuple[str, str]:
    """Return ``(manifest_toml, rust_source)`` for the generated package.

    The manifest is the default manifest, overlaid with the script's embedded
    fragment, overlaid with the requested dependencies.
    """
    fragment, source = split_input(script_input)
    source = wrap_source(script_input, source)
    logger.debug("fragment: %r", fragment)
    logger.debug("source: %r", source)

    embedded = parse_manifest_fragment(fragment)
    manifest = merge_manifest(default_manifest(script_input), embedded)
    manifest = merge_manifest(manifest, dependency_manifest(deps))
    logger.debug("manifest: %r", manifest)

    return tomli_w.dumps(manifest), source


def parse_manifest_fragment(fragment: str) -> ManifestTable:
    """Parse an embedded manifest fragment as TOML."""
    try:
        return tomllib.loads(fragment)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestParseError(f"could not parse embedded manifest: {exc}") from exc


def default_manifest(script_input: ScriptInput) -> ManifestTable:
    """Return the default manifest for an input, named after its safe name."""
    text = DEFAULT_MANIFEST.replace(NAME_PLACEHOLDER, safe_name(script_input))
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestParseError(f"could not parse default manifest: {exc}") from exc


def dependency_manifest(deps: DependencyList) -> ManifestTable:
    """Return a partial manifest declaring ``deps``.

    Versions starting with ``{`` are inline TOML tables, such as
    ``{ git = "https://..." }``, and are parsed rather than quoted.
    """
    table: dict[str, ManifestValue] = {}
    for name, version in deps:
        table[name] = _parse_inline_table(name, version) if version.startswith(INLINE_TABLE_PREFIX) else version
    return {DEPENDENCIES_TABLE: table}


def _parse_inline_table(name: str, version: str) -> ManifestValue:
    try:
        return tomllib.loads(f"{_INLINE_VALUE_KEY} = {version}")[_INLINE_VALUE_KEY]
    except tomllib.TOMLDecodeError as exc:
        raise ManifestParseError(f"could not parse dependency manifest for '{name}': {exc}") from exc
