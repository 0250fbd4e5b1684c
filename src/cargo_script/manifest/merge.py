"""Shallow merging of manifest tables."""

from __future__ import annotations

from collections.abc import Mapping

from cargo_script.exceptions import MergeConflictError
from cargo_script.types import ManifestTable, ManifestValue


def merge_manifest(base: Mapping[str, ManifestValue], overlay: Mapping[str, ManifestValue]) -> ManifestTable:
    """Merge ``overlay`` into a copy of ``base``.

    Only top-level tables are merged, by extending the base table with the
    overlay's entries. Nested tables inside them are replaced as whole values,
    as is every non-table value. A table meeting a non-table under the same key
    raises :class:`MergeConflictError`.
    """
    merged: ManifestTable = dict(base)
    for key, value in overlay.items():
        existing = merged.get(key)
        if isinstance(value, dict):
            if existing is None:
                merged[key] = dict(value)
                continue
            if not isinstance(existing, dict):
                raise MergeConflictError(
                    f"cannot merge manifests: cannot merge table and non-table values for key '{key}'"
                )
            merged[key] = {**existing, **value}
            continue

        if isinstance(existing, dict):
            raise MergeConflictError(
                f"cannot merge manifests: cannot merge table and non-table values for key '{key}'"
            )
        merged[key] = value
    return merged
