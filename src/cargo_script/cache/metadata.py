"""Loading and persistence of per-slot package metadata."""

from __future__ import annotations

import logging
from pathlib import Path

from cargo_script.cache.paths import metadata_path
from cargo_script.constants.cache import METADATA_TEMP_PREFIX, METADATA_TEMP_SUFFIX
from cargo_script.exceptions import MetadataCorruptError, MetadataNotFoundError
from cargo_script.io import load_json_file, write_json_atomic
from cargo_script.model import PackageMetadata

logger = logging.getLogger(__name__)


def load_metadata(slot_path: Path) -> PackageMetadata:
    """Load the metadata stored in a cache slot.

    Raises :class:`MetadataNotFoundError` when the file is missing and
    :class:`MetadataCorruptError` when it cannot be read or has the wrong shape.
    """
    path = metadata_path(slot_path)
    logger.debug("meta_path: %s", path)
    if not path.is_file():
        raise MetadataNotFoundError(f"No metadata file at {path}")

    try:
        payload = load_json_file(path)
    except (OSError, ValueError) as exc:
        raise MetadataCorruptError(f"Failed to read metadata at {path}: {exc}") from exc

    return metadata_from_payload(payload, source=path)


def save_metadata(slot_path: Path, metadata: PackageMetadata) -> None:
    """Persist metadata atomically, replacing any previous file."""
    path = metadata_path(slot_path)
    logger.debug("meta_path: %s", path)
    write_json_atomic(
        path=path,
        payload=metadata.to_dict(),
        temp_prefix=METADATA_TEMP_PREFIX,
        temp_suffix=METADATA_TEMP_SUFFIX,
    )


def metadata_from_payload(payload: object, *, source: Path) -> PackageMetadata:
    """Validate a decoded JSON payload and build :class:`PackageMetadata`."""
    if not isinstance(payload, dict):
        raise MetadataCorruptError(f"Metadata at {source} must be a JSON object")

    path = payload.get("path")
    modified = payload.get("modified")
    debug = payload.get("debug")
    raw_deps = payload.get("deps")

    if path is not None and not isinstance(path, str):
        raise MetadataCorruptError(f"Metadata at {source} has invalid 'path'")
    if modified is not None and (isinstance(modified, bool) or not isinstance(modified, int)):
        raise MetadataCorruptError(f"Metadata at {source} has invalid 'modified'")
    if not isinstance(debug, bool):
        raise MetadataCorruptError(f"Metadata at {source} has invalid 'debug'")
    if not isinstance(raw_deps, list):
        raise MetadataCorruptError(f"Metadata at {source} has invalid 'deps'")

    deps: list[tuple[str, str]] = []
    for entry in raw_deps:
        if (
            not isinstance(entry, list)
            or len(entry) != 2
            or not all(isinstance(part, str) for part in entry)
        ):
            raise MetadataCorruptError(f"Metadata at {source} has invalid dependency entry {entry!r}")
        deps.append((entry[0], entry[1]))

    return PackageMetadata(path=path, modified=modified, debug=debug, deps=tuple(deps))
