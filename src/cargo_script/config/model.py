"""Config data model for cargo-script."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from cargo_script.cache.paths import default_cache_root
from cargo_script.constants.cache import DEFAULT_MAX_CACHE_AGE_DAYS, MILLIS_PER_DAY
from cargo_script.constants.config import DEFAULT_CARGO_EXECUTABLE, DEFAULT_SEARCH_EXTENSIONS


@dataclass(frozen=True)
class ScriptConfig:
    """Resolved cargo-script settings."""

    cache_dir: Path = field(default_factory=default_cache_root)
    max_cache_age_days: int = DEFAULT_MAX_CACHE_AGE_DAYS
    cargo: str = DEFAULT_CARGO_EXECUTABLE
    search_extensions: tuple[str, ...] = DEFAULT_SEARCH_EXTENSIONS

    @property
    def max_cache_age_ms(self) -> int:
        """Eviction age for cache slots, in milliseconds."""
        return self.max_cache_age_days * MILLIS_PER_DAY
