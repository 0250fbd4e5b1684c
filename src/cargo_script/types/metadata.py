"""Typed metadata payload persisted in each cache slot."""

from __future__ import annotations

from typing import TypedDict


class MetadataPayload(TypedDict):
    """JSON shape of ``metadata.json``."""

    path: str | None
    modified: int | None
    debug: bool
    deps: list[list[str]]
