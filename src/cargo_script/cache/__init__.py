"""Content-addressed cache of generated Cargo packages."""

from __future__ import annotations

from cargo_script.cache.decision import cache_action_for
from cargo_script.cache.identity import IdentityHasher
from cargo_script.cache.janitor import clean_cache
from cargo_script.cache.metadata import load_metadata, save_metadata
from cargo_script.cache.paths import default_cache_root, executable_path
from cargo_script.cache.slot import SlotGuard

__all__ = [
    "IdentityHasher",
    "SlotGuard",
    "cache_action_for",
    "clean_cache",
    "default_cache_root",
    "executable_path",
    "load_metadata",
    "save_metadata",
]
