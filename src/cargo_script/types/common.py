"""Cross-module type aliases."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import TypeAlias

ManifestScalar: TypeAlias = str | int | float | bool | datetime | date | time
ManifestValue: TypeAlias = ManifestScalar | list["ManifestValue"] | dict[str, "ManifestValue"]
ManifestTable: TypeAlias = dict[str, ManifestValue]

Dependency: TypeAlias = tuple[str, str]
DependencyList: TypeAlias = tuple[Dependency, ...]
