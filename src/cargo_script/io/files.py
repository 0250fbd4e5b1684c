"""Filesystem timestamp helpers.

All timestamps are integer milliseconds since the Unix epoch.
"""

from __future__ import annotations

import time
from pathlib import Path

NANOS_PER_MILLI: int = 1_000_000


def file_last_modified_ms(path: Path) -> int:
    """Return the last-modified time of ``path`` in milliseconds."""
    return path.stat().st_mtime_ns // NANOS_PER_MILLI


def current_time_ms() -> int:
    """Return the current wall-clock time in milliseconds."""
    return time.time_ns() // NANOS_PER_MILLI
